"""
Pydantic schemas for the person API responses.

These schemas define the JSON contract. Request parameters are plain
form/query values bound in dependencies.py, so there are no request bodies.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.domain.person.entities import Page, Person


class PersonResponse(BaseModel):
    """A person as returned by the API."""

    id: int
    name: str

    @classmethod
    def from_entity(cls, person: Person) -> "PersonResponse":
        return cls(id=person.id, name=person.name)


class PersonPageResponse(BaseModel):
    """One page of persons plus listing metadata, with camelCase keys.

    Attributes:
        content: Persons in the page, in the requested order.
        number: Zero-based page number.
        size: Requested page size.
        total_elements: Number of persons in the whole store.
        total_pages: Number of pages of this size.
        number_of_elements: Number of persons in this page.
        first: Whether this is the first page.
        last: Whether this is the last page.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    content: list[PersonResponse]
    number: int
    size: int
    total_elements: int
    total_pages: int
    number_of_elements: int
    first: bool
    last: bool

    @classmethod
    def from_page(cls, page: Page) -> "PersonPageResponse":
        return cls(
            content=[PersonResponse.from_entity(p) for p in page.content],
            number=page.page,
            size=page.size,
            total_elements=page.total_elements,
            total_pages=page.total_pages,
            number_of_elements=page.number_of_elements,
            first=page.first,
            last=page.last,
        )
