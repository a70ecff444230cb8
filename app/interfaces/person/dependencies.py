"""
Dependency injection for the person bounded context.

Provides FastAPI dependency functions that wire the SQL adapter into the
person service via constructor injection, and that bind raw request
parameters to domain values. These are the composition root for the
person context.
"""

from functools import lru_cache
from typing import Optional

from fastapi import Query, Request
from sqlalchemy.engine import Engine

from app.application.person.person_service import PersonService
from app.core.config import settings
from app.domain.person.entities import DEFAULT_SORT, PageRequest, SortKey, SortOrder
from app.domain.person.errors import MissingParameterError
from app.infrastructure.database import build_engine, create_schema
from app.infrastructure.person.person_repository import SqlPersonRepository

NAME_PARAMETER = "name"
SORT_DIRECTIONS = {"asc": False, "desc": True}
# Largest page number a client may address; anything beyond reads page 0.
PAGE_MAX = 2**31 - 1


@lru_cache
def get_engine() -> Engine:
    """Build the process-wide engine and make sure the schema exists."""
    engine = build_engine(settings.database_url, echo=settings.database_echo)
    create_schema(engine)
    return engine


def get_person_service() -> PersonService:
    """Build PersonService with its infrastructure dependencies."""
    return PersonService(
        person_repo=SqlPersonRepository(engine=get_engine()),
    )


async def get_name_param(request: Request) -> str:
    """Return the required ``name`` parameter.

    Looked up in the url-encoded form body first, then in the query
    string. An empty value is returned as is; only an absent one is an
    error, so the naming grammar can report it.

    Raises:
        MissingParameterError: If the parameter is not present at all.
    """
    form = await request.form()
    name = form.get(NAME_PARAMETER)
    if name is None:
        name = request.query_params.get(NAME_PARAMETER)
    if not isinstance(name, str):
        raise MissingParameterError(NAME_PARAMETER)
    return name


def get_page_request(
    page: Optional[str] = None,
    size: Optional[str] = None,
    sort: Optional[list[str]] = Query(None),
) -> PageRequest:
    """Turn listing query parameters into a PageRequest.

    Paging values are normalised rather than rejected. A page that is not
    an integer, negative, or past PAGE_MAX becomes 0. A size that is not
    an integer or below 1 becomes the default size, and one above the
    maximum is clamped to it.

    ``sort`` may be repeated. Each value is ``property[,property...][,asc|desc]``;
    a trailing direction applies to every property of that value.

    Raises:
        ValueError: If a sort property is not a Person property.
    """
    page_number = _parse_int(page)
    if page_number is None or not 0 <= page_number <= PAGE_MAX:
        page_number = 0

    page_size = _parse_int(size)
    if page_size is None or page_size < 1:
        page_size = settings.page_size_default
    page_size = min(page_size, settings.page_size_max)

    return PageRequest(page=page_number, size=page_size, sort=_parse_sort(sort))


def _parse_int(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def _parse_sort(values: Optional[list[str]]) -> tuple[SortOrder, ...]:
    orders: list[SortOrder] = []
    for value in values or ():
        parts = [part.strip() for part in value.split(",") if part.strip()]
        if not parts:
            continue

        descending = False
        if parts[-1].lower() in SORT_DIRECTIONS:
            descending = SORT_DIRECTIONS[parts.pop().lower()]

        for prop in parts:
            try:
                key = SortKey(prop)
            except ValueError:
                raise ValueError(
                    f"No property '{prop}' found for type 'Person'"
                ) from None
            orders.append(SortOrder(key=key, descending=descending))

    return tuple(orders) or DEFAULT_SORT
