"""Account API views - the signed-in user's addresses.

``user_id`` is the caller's own id; an address owned by someone else is
reported as not found.
"""

from app.container import container
from app.repositories.errors import IntegrityError
from web.api.errors import NotFoundError, ValidationError

from .schemas import AddressCreate, AddressesResponse, AddressItem, AddressUpdate


def list_addresses(user_id: str) -> AddressesResponse:
    """Default address first."""
    return AddressesResponse(items=[AddressItem(**a) for a in container.addresses.list_addresses(user_id)])


def get_address(user_id: str, address_id: str) -> AddressItem:
    address = container.addresses.get_address(user_id, address_id)
    if address is None:
        raise NotFoundError("Address not found")
    return AddressItem(**address)


def create_address(user_id: str, form: AddressCreate) -> AddressItem:
    try:
        address = container.addresses.create_address(user_id, **form.model_dump())
    except IntegrityError as e:
        raise ValidationError(e.message) from e
    return AddressItem(**address)


def update_address(user_id: str, address_id: str, form: AddressUpdate) -> AddressItem:
    changes = {k: v for k, v in form.model_dump(exclude_unset=True).items() if v is not None}
    address = container.addresses.update_address(user_id, address_id, **changes)
    if address is None:
        raise NotFoundError("Address not found")
    return AddressItem(**address)


def delete_address(user_id: str, address_id: str) -> None:
    if not container.addresses.delete_address(user_id, address_id):
        raise NotFoundError("Address not found")


def set_default_address(user_id: str, address_id: str) -> AddressItem:
    address = container.addresses.set_default(user_id, address_id)
    if address is None:
        raise NotFoundError("Address not found")
    return AddressItem(**address)
