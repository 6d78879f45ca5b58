"""Shared BDD fixtures and steps for checkout."""

import pytest
from pytest_bdd import given, parsers

from storefront.actions.cart import add_to_cart
from storefront.shared.identity import CurrentUser


@pytest.fixture()
def context():
    return {}


@given("the customer is signed in", target_fixture="shopper")
def signed_in_customer():
    return CurrentUser(id="cust-bdd-101", email="checkout@example.com", phone="+63 917 555 0199")


@given(parsers.cfparse("a variant priced at {price:d} with {stock:d} in stock"), target_fixture="variant_id")
def variant_in_stock(make_variant, price, stock):
    return make_variant(price=float(price), inventory=stock)


@given(parsers.cfparse("the customer has {qty:d} of the variant in the cart"))
def variant_in_cart(shopper, variant_id, qty):
    assert add_to_cart(shopper, variant_id, qty).is_ok
