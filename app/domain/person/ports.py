"""
Port interfaces (ABCs) for the person bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.person.entities import Page, PageRequest, Person


class PersonRepository(ABC):
    """Port for persisting and retrieving persons.

    Every method is a single atomic operation. The store assigns ids and
    never modifies a name on its own.
    """

    @abstractmethod
    def insert(self, name: str) -> Person:
        """Persist a new person and return it with its assigned id."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, person_id: int) -> Optional[Person]:
        """Return a person by its id, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def list_page(self, page_request: PageRequest) -> Page:
        """Return one page of persons.

        Args:
            page_request: Page number, size and ordering.

        Returns:
            The requested window plus the total number of persons.
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, person: Person) -> Optional[Person]:
        """Write back an existing person's name.

        Returns:
            The person, or None if its row no longer exists.
        """
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, person_id: int) -> None:
        """Delete a person. Deleting an unknown id is a no-op."""
        raise NotImplementedError
