"""Address book commands, handler, repository and reads, scoped to the owning customer."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Boolean, Identifier, String
from protean.utils.globals import current_domain

from storefront.address.address import ADDRESS_FIELDS, Address, AddressType
from storefront.domain import storefront


@storefront.repository(part_of=Address)
class AddressRepository:
    def for_customer(self, customer_id: str) -> list[Address]:
        """Live addresses, the default first and then newest first."""
        addresses = self._dao.query.filter(customer_id=str(customer_id)).all().items
        live = [a for a in addresses if not a.is_deleted]
        live.sort(key=lambda a: a.created_at, reverse=True)
        live.sort(key=lambda a: not a.is_default)
        return live

    def owned_by(self, address_id: str, customer_id: str) -> Address | None:
        """The address, only if it is live and belongs to the customer."""
        addresses = self._dao.query.filter(id=str(address_id), customer_id=str(customer_id)).all().items
        return next((a for a in addresses if not a.is_deleted), None)


@storefront.command(part_of="Address")
class AddAddress:
    customer_id = Identifier(required=True)
    address_type = String(choices=AddressType)
    first_name = String(required=True, max_length=100)
    last_name = String(required=True, max_length=100)
    company = String(max_length=255)
    address_line1 = String(required=True, max_length=255)
    address_line2 = String(max_length=255)
    city = String(required=True, max_length=100)
    state = String(required=True, max_length=100)
    zip_code = String(required=True, max_length=20)
    country = String(max_length=100)
    phone = String(max_length=30)
    is_default = Boolean(default=False)


@storefront.command(part_of="Address")
class UpdateAddress:
    customer_id = Identifier(required=True)
    address_id = Identifier(required=True)
    address_type = String(choices=AddressType)
    first_name = String(max_length=100)
    last_name = String(max_length=100)
    company = String(max_length=255)
    address_line1 = String(max_length=255)
    address_line2 = String(max_length=255)
    city = String(max_length=100)
    state = String(max_length=100)
    zip_code = String(max_length=20)
    country = String(max_length=100)
    phone = String(max_length=30)
    is_default = Boolean()


@storefront.command(part_of="Address")
class RemoveAddress:
    customer_id = Identifier(required=True)
    address_id = Identifier(required=True)


def _owned(repo, customer_id, address_id):
    address = repo.owned_by(address_id, customer_id)
    if address is None:
        raise ObjectNotFoundError({"address_id": "Address not found"})
    return address


def _clear_default(repo, customer_id, keep_id=None):
    for address in repo.for_customer(customer_id):
        if address.is_default and str(address.id) != str(keep_id):
            address.set_default(False)
            repo.add(address)


@storefront.command_handler(part_of=Address)
class ManageAddressesHandler:
    @handle(AddAddress)
    def add_address(self, command):
        repo = current_domain.repository_for(Address)
        if command.is_default:
            _clear_default(repo, command.customer_id)

        fields = {
            field: getattr(command, field) for field in ADDRESS_FIELDS if getattr(command, field) is not None
        }
        address = Address.create(command.customer_id, is_default=command.is_default or False, **fields)
        repo.add(address)
        return str(address.id)

    @handle(UpdateAddress)
    def update_address(self, command):
        repo = current_domain.repository_for(Address)
        address = _owned(repo, command.customer_id, command.address_id)

        address.update(**{field: getattr(command, field) for field in ADDRESS_FIELDS})
        if command.is_default is not None:
            if command.is_default:
                _clear_default(repo, command.customer_id, keep_id=address.id)
            address.set_default(command.is_default)
        repo.add(address)

    @handle(RemoveAddress)
    def remove_address(self, command):
        repo = current_domain.repository_for(Address)
        address = _owned(repo, command.customer_id, command.address_id)
        address.soft_delete()
        repo.add(address)


def _address_row(address):
    return {
        "id": str(address.id),
        "address_type": address.address_type,
        "first_name": address.first_name,
        "last_name": address.last_name,
        "company": address.company,
        "address_line1": address.address_line1,
        "address_line2": address.address_line2,
        "city": address.city,
        "state": address.state,
        "zip_code": address.zip_code,
        "country": address.country,
        "phone": address.phone,
        "is_default": address.is_default,
    }


def address_book(customer_id: str) -> list[dict]:
    return [_address_row(a) for a in current_domain.repository_for(Address).for_customer(customer_id)]
