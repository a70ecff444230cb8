"""
Service: Manage person records.

Operations: list, add, get_by_id, update, remove.
Side effects: writes through the PersonRepository port.
Failure cases: InvalidNameError, PersonNotFoundError.
"""

import logging

from app.domain.person.entities import Page, PageRequest, Person
from app.domain.person.errors import InvalidNameError, PersonNotFoundError
from app.domain.person.name_validator import validate_name
from app.domain.person.ports import PersonRepository

logger = logging.getLogger(__name__)


class PersonService:
    """Orchestrates person CRUD operations.

    Mutating operations pass the name through the naming grammar before
    touching the store, so a rejected name never causes a write.
    """

    def __init__(self, person_repo: PersonRepository) -> None:
        """Initialize the service.

        Args:
            person_repo: Repository used to persist persons.
        """
        self._person_repo = person_repo

    def list(self, page_request: PageRequest) -> Page:
        """Return one page of persons, ordered as the request asks."""
        logger.debug(
            "Listing persons: page=%d, size=%d, sort=%s",
            page_request.page,
            page_request.size,
            ",".join(
                f"{o.key.value}:{'desc' if o.descending else 'asc'}"
                for o in page_request.sort
            ),
        )
        return self._person_repo.list_page(page_request)

    def add(self, name: str) -> Person:
        """Register a new person.

        Args:
            name: Name of the person.

        Returns:
            The stored person with its assigned id.

        Raises:
            InvalidNameError: If the name does not match the naming grammar.
        """
        self._check_name(name)
        person = self._person_repo.insert(name)
        logger.info("Added person id=%d", person.id)
        return person

    def get_by_id(self, person_id: int) -> Person:
        """Return the person with the given id.

        Raises:
            PersonNotFoundError: If no such person exists.
        """
        person = self._person_repo.get_by_id(person_id)
        if person is None:
            raise PersonNotFoundError(person_id)
        return person

    def update(self, person_id: int, name: str) -> Person:
        """Rename an existing person.

        The name is validated before the lookup, so an invalid name is
        reported even when the id does not exist.

        Args:
            person_id: Id of the person to rename.
            name: The new name.

        Returns:
            The updated person.

        Raises:
            InvalidNameError: If the name does not match the naming grammar.
            PersonNotFoundError: If no such person exists.
        """
        self._check_name(name)
        person = self.get_by_id(person_id)
        person.name = name
        updated = self._person_repo.update(person)
        if updated is None:
            # Deleted between the lookup and the write.
            raise PersonNotFoundError(person_id)
        logger.info("Updated person id=%d", person_id)
        return updated

    def remove(self, person_id: int) -> None:
        """Delete a person. Unknown ids are ignored."""
        self._person_repo.delete_by_id(person_id)
        logger.info("Removed person id=%d", person_id)

    @staticmethod
    def _check_name(name: str) -> None:
        outcome = validate_name(name)
        if not outcome.is_valid:
            logger.debug("Rejected name: %s", outcome.violation.name)
            raise InvalidNameError(outcome.violation)
