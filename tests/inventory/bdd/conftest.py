"""Shared BDD fixtures and steps for the stock ledger."""

import pytest
from pytest_bdd import given, parsers

from storefront.shared.identity import CurrentUser, UserRole


@pytest.fixture()
def context():
    return {}


@given(parsers.cfparse("a variant with {stock:d} in stock"), target_fixture="variant_id")
def variant_with_stock(make_variant, stock):
    return make_variant(inventory=stock)


@given("a staff member is signed in", target_fixture="staff")
def staff_member():
    return CurrentUser(id="staff-bdd-001", email="stock@example.com", role=UserRole.ADMIN.value)
