"""
Domain entities for the person bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

import math
from dataclasses import dataclass
from enum import Enum


class SortKey(Enum):
    """Person attributes a page of results can be ordered by."""

    ID = "id"
    NAME = "name"


@dataclass
class Person:
    """A person registered in the system.

    The id is assigned by the store on creation and never changes.
    Only the name is mutable.
    """

    id: int
    name: str


@dataclass(frozen=True)
class SortOrder:
    """One ordering criterion of a listing."""

    key: SortKey
    descending: bool = False


DEFAULT_SORT = (SortOrder(SortKey.ID),)


@dataclass(frozen=True)
class PageRequest:
    """A window over the id-ordered (by default) person listing.

    Attributes:
        page: Zero-based page number.
        size: Maximum number of items in the page.
        sort: Ordering criteria, most significant first.
    """

    page: int = 0
    size: int = 20
    sort: tuple[SortOrder, ...] = DEFAULT_SORT

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class Page:
    """A bounded, ordered slice of persons plus the listing metadata."""

    content: list[Person]
    page: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 0
        return math.ceil(self.total_elements / self.size)

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def first(self) -> bool:
        return self.page == 0

    @property
    def last(self) -> bool:
        return self.page + 1 >= self.total_pages
