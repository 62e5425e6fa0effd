"""Account (address book) schemas."""

from pydantic import BaseModel, Field


class AddressItem(BaseModel):
    id: str
    full_name: str
    street_address: str
    city: str
    state: str
    postal_code: str
    country: str
    is_default: bool


class AddressesResponse(BaseModel):
    items: list[AddressItem]


class AddressCreate(BaseModel):
    full_name: str = Field(min_length=1)
    street_address: str = Field(min_length=1)
    city: str = Field(min_length=1)
    state: str = Field(min_length=1)
    postal_code: str = Field(min_length=1)
    country: str = Field(min_length=1)
    is_default: bool = False


class AddressUpdate(BaseModel):
    full_name: str | None = Field(default=None, min_length=1)
    street_address: str | None = Field(default=None, min_length=1)
    city: str | None = Field(default=None, min_length=1)
    state: str | None = Field(default=None, min_length=1)
    postal_code: str | None = Field(default=None, min_length=1)
    country: str | None = Field(default=None, min_length=1)
    is_default: bool | None = None
