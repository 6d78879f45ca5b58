"""Address book actions for the signed-in customer."""

from protean.utils.globals import current_domain

from storefront.actions.boundary import action, require_user, revalidate
from storefront.address.address import ADDRESS_FIELDS
from storefront.address.management import AddAddress, RemoveAddress, UpdateAddress, address_book


def _address_fields(data: dict) -> dict:
    return {field: data.get(field) for field in ADDRESS_FIELDS if data.get(field) is not None}


@action("Failed to load addresses")
def get_user_addresses(user):
    if user is None:
        return []
    return address_book(user.id)


@action("Failed to add address")
def add_address(user, data: dict):
    """Save a new address. Returns ``{"address_id"}``."""
    require_user(user)
    address_id = current_domain.process(
        AddAddress(customer_id=user.id, is_default=bool(data.get("is_default")), **_address_fields(data)),
        asynchronous=False,
    )
    revalidate("/account/addresses")
    return {"address_id": address_id}


@action("Failed to update address")
def update_address(user, address_id, data: dict):
    require_user(user)
    current_domain.process(
        UpdateAddress(
            customer_id=user.id,
            address_id=address_id,
            is_default=data.get("is_default"),
            **_address_fields(data),
        ),
        asynchronous=False,
    )
    revalidate("/account/addresses")


@action("Failed to delete address")
def delete_address(user, address_id):
    require_user(user)
    current_domain.process(RemoveAddress(customer_id=user.id, address_id=address_id), asynchronous=False)
    revalidate("/account/addresses")
