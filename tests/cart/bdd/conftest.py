"""Shared BDD fixtures and steps for the cart."""

import pytest
from pytest_bdd import given, parsers

from storefront.shared.identity import CurrentUser


@pytest.fixture()
def context():
    return {}


@given(parsers.cfparse("a variant priced at {price:d} with {stock:d} in stock"), target_fixture="variant_id")
def variant_in_stock(make_variant, price, stock):
    return make_variant(price=float(price), inventory=stock)


@given("the customer is signed in", target_fixture="shopper")
def signed_in_customer():
    return CurrentUser(id="cust-bdd-001", email="bdd@example.com")
