"""
Adapter: Person repository.

Implements PersonRepository port.
Persists and retrieves persons through SQLAlchemy Core, so any database
SQLAlchemy supports (SQLite, PostgreSQL) can back the service.
"""

import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.engine import Engine

from app.domain.person.entities import Page, PageRequest, Person, SortKey
from app.domain.person.ports import PersonRepository
from app.infrastructure.database import persons

logger = logging.getLogger(__name__)

_SORT_COLUMNS = {
    SortKey.ID: persons.c.id,
    SortKey.NAME: persons.c.name,
}


class SqlPersonRepository(PersonRepository):
    """Stores persons in the persons table.

    Implements the PersonRepository port defined in the domain layer.
    Each method runs in its own transaction.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def insert(self, name: str) -> Person:
        """Insert a new person and return it with its generated id.

        Args:
            name: An already validated name.

        Returns:
            The stored Person.
        """
        with self._engine.begin() as conn:
            result = conn.execute(persons.insert().values(name=name))
            person_id = result.inserted_primary_key[0]

        logger.debug("Inserted person id=%d.", person_id)
        return Person(id=person_id, name=name)

    def get_by_id(self, person_id: int) -> Optional[Person]:
        """Return a person by id, or None if there is no such row."""
        query = select(persons.c.id, persons.c.name).where(persons.c.id == person_id)

        with self._engine.connect() as conn:
            row = conn.execute(query).first()

        if row is None:
            return None
        return Person(id=row.id, name=row.name)

    def list_page(self, page_request: PageRequest) -> Page:
        """Return one page of persons and the total row count.

        Rows sharing a sort value are ordered by id so that pages are stable.

        Args:
            page_request: Page number, size and ordering.

        Returns:
            A Page of Person entities.
        """
        order_by = []
        for order in page_request.sort:
            column = _SORT_COLUMNS[order.key]
            order_by.append(column.desc() if order.descending else column.asc())
        if all(order.key is not SortKey.ID for order in page_request.sort):
            order_by.append(persons.c.id.asc())

        query = (
            select(persons.c.id, persons.c.name)
            .order_by(*order_by)
            .limit(page_request.size)
            .offset(page_request.offset)
        )
        count_query = select(func.count()).select_from(persons)

        with self._engine.connect() as conn:
            total = conn.execute(count_query).scalar_one()
            rows = conn.execute(query).fetchall()

        return Page(
            content=[Person(id=row.id, name=row.name) for row in rows],
            page=page_request.page,
            size=page_request.size,
            total_elements=total,
        )

    def update(self, person: Person) -> Optional[Person]:
        """Write the person's current name back to its row.

        Returns:
            The person, or None if its row has been deleted meanwhile.
        """
        with self._engine.begin() as conn:
            result = conn.execute(
                persons.update()
                .where(persons.c.id == person.id)
                .values(name=person.name)
            )

        if result.rowcount == 0:
            logger.debug("Person id=%d vanished before update.", person.id)
            return None
        logger.debug("Updated person id=%d.", person.id)
        return person

    def delete_by_id(self, person_id: int) -> None:
        """Delete the person's row if it exists."""
        with self._engine.begin() as conn:
            result = conn.execute(persons.delete().where(persons.c.id == person_id))

        if result.rowcount == 0:
            logger.debug("No person id=%d to delete.", person_id)
