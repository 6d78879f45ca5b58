"""Tests for the action boundary: error classification and Result wrapping."""

from unittest.mock import MagicMock

import pytest
from protean.exceptions import ExpectedVersionError, ObjectNotFoundError, TransactionError, ValidationError
from sqlalchemy.exc import IntegrityError

from storefront.actions.boundary import action, require_admin, require_user, revalidate, to_err
from storefront.revalidation import set_page_cache
from storefront.shared.errors import (
    AuthenticationRequired,
    EmptyCartError,
    InsufficientStockError,
    PermissionDenied,
)
from storefront.shared.identity import CurrentUser, UserRole
from storefront.shared.result import Err, ErrorKind, Ok


class TestToErr:
    @pytest.mark.parametrize(
        ("exc", "kind"),
        [
            (EmptyCartError({"cart": ["Cart is empty"]}), ErrorKind.EMPTY_CART),
            (InsufficientStockError({"SKU-1": ["Only 1 available"]}), ErrorKind.OUT_OF_STOCK),
            (ValidationError({"quantity": ["is required"]}), ErrorKind.VALIDATION),
            (ObjectNotFoundError({"order_id": "Order not found"}), ErrorKind.NOT_FOUND),
            (AuthenticationRequired("User not authenticated"), ErrorKind.UNAUTHENTICATED),
            (PermissionDenied("Admin access required"), ErrorKind.FORBIDDEN),
            (IntegrityError("UPDATE", {}, Exception("serialization failure")), ErrorKind.CONFLICT),
            (ExpectedVersionError("Wrong expected version: 3 (Aggregate: ProductVariant)"), ErrorKind.CONFLICT),
            (
                TransactionError("Unit of Work commit failed", extra_info={"original_exception": "IntegrityError"}),
                ErrorKind.CONFLICT,
            ),
            (
                TransactionError("Unit of Work commit failed", extra_info={"original_exception": "OperationalError"}),
                ErrorKind.INFRASTRUCTURE,
            ),
            (RuntimeError("connection reset"), ErrorKind.INFRASTRUCTURE),
        ],
    )
    def test_kind(self, exc, kind):
        assert to_err(exc, "Failed").kind == kind

    def test_validation_keeps_field_errors(self):
        err = to_err(ValidationError({"quantity": ["must be at least 1"], "variant_id": ["is required"]}), "Failed")

        assert err.message == "must be at least 1"
        assert err.errors == {"quantity": ["must be at least 1"], "variant_id": ["is required"]}

    def test_not_found_message_comes_from_the_message_map(self):
        err = to_err(ObjectNotFoundError({"order_id": "Order not found"}), "Failed")

        assert err.kind == ErrorKind.NOT_FOUND
        assert err.message == "Order not found"

    def test_not_found_with_plain_message(self):
        assert to_err(ObjectNotFoundError("gone"), "Failed").message == "gone"

    def test_infrastructure_hides_the_cause(self):
        err = to_err(RuntimeError("password=hunter2"), "Failed to load cart")
        assert err.message == "Failed to load cart"
        assert err.errors == {}


class TestActionDecorator:
    def test_plain_value_is_wrapped(self):
        @action("Failed")
        def answer(user):
            return 42

        assert answer(None) == Ok(42)

    def test_result_passes_through(self):
        err = Err(ErrorKind.NOT_FOUND, "gone")

        @action("Failed")
        def lookup(user):
            return err

        assert lookup(None) is err

    def test_unexpected_exception_becomes_infrastructure(self):
        @action("Failed to count")
        def broken(user):
            raise KeyError("boom")

        result = broken(CurrentUser(id="cust-001"))

        assert result == Err(ErrorKind.INFRASTRUCTURE, "Failed to count")
        assert not result.is_ok

    def test_not_found_is_returned_not_raised(self):
        @action("Failed")
        def lookup(user):
            raise ObjectNotFoundError({"item_id": "Cart item not found"})

        assert lookup(None) == Err(ErrorKind.NOT_FOUND, "Cart item not found")

    def test_version_clash_is_conflict(self):
        @action("Failed to create order")
        def place(user):
            raise ExpectedVersionError("Wrong expected version")

        assert place(None).kind == ErrorKind.CONFLICT

    def test_arguments_are_forwarded(self):
        @action("Failed")
        def add(user, a, b=0):
            return a + b

        assert add(None, 2, b=3).value == 5


class TestGuards:
    def test_require_user(self):
        user = CurrentUser(id="cust-001")
        assert require_user(user) is user
        with pytest.raises(AuthenticationRequired):
            require_user(None)
        with pytest.raises(AuthenticationRequired):
            require_user(CurrentUser(id=""))

    def test_require_admin(self):
        admin = CurrentUser(id="admin-001", role=UserRole.ADMIN.value)
        assert require_admin(admin) is admin
        with pytest.raises(PermissionDenied):
            require_admin(CurrentUser(id="cust-001"))


class TestRevalidate:
    def test_adapter_failure_is_logged_not_raised(self):
        failing = MagicMock()
        failing.revalidate.side_effect = RuntimeError("endpoint down")
        set_page_cache(failing)

        revalidate("/cart", "/account/orders")

        failing.revalidate.assert_called_once_with("/cart")

    def test_missing_endpoint_setting_is_tolerated(self, monkeypatch):
        monkeypatch.setenv("PAGE_CACHE_ADAPTER", "http")
        monkeypatch.delenv("REVALIDATE_URL", raising=False)

        revalidate("/cart")
