"""Address value embedded in buildings and campuses."""

from pydantic import BaseModel


class Address(BaseModel):
    """Postal address. Every field is optional so partial addresses round-trip."""

    unit_street: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = None
