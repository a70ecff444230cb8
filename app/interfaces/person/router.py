"""
FastAPI routes for the person bounded context.

Routes are declared in one explicit table, PERSON_ROUTES, mapping
(verb, path) to an endpoint, and registered by build_person_router at
application startup. Every endpoint takes the raw Request so that the
rate limiter can key it by client. Endpoints only bind parameters and
delegate to PersonService. Error mapping is handled by the centralized handlers.
"""

from typing import Any, Callable

from fastapi import APIRouter, Depends, Request, Response
from slowapi import Limiter

from app.application.person.person_service import PersonService
from app.domain.person.entities import PageRequest
from app.interfaces.person.dependencies import (
    get_name_param,
    get_page_request,
    get_person_service,
)
from app.interfaces.person.schemas import PersonPageResponse, PersonResponse
from app.shared.errors.error_mapper import ErrorPayload

PERSON_PREFIX = "/person"


def list_persons(
    request: Request,
    page_request: PageRequest = Depends(get_page_request),
    service: PersonService = Depends(get_person_service),
) -> PersonPageResponse:
    """List persons, ascending by id unless another order is requested."""
    return PersonPageResponse.from_page(service.list(page_request))


def add_person(
    request: Request,
    name: str = Depends(get_name_param),
    service: PersonService = Depends(get_person_service),
) -> PersonResponse:
    """Register a new person."""
    return PersonResponse.from_entity(service.add(name))


def get_person(
    request: Request,
    person_id: int,
    service: PersonService = Depends(get_person_service),
) -> PersonResponse:
    """Return one person by id."""
    return PersonResponse.from_entity(service.get_by_id(person_id))


def update_person(
    request: Request,
    person_id: int,
    name: str = Depends(get_name_param),
    service: PersonService = Depends(get_person_service),
) -> PersonResponse:
    """Rename an existing person."""
    return PersonResponse.from_entity(service.update(person_id, name))


def remove_person(
    request: Request,
    person_id: int,
    service: PersonService = Depends(get_person_service),
) -> Response:
    """Delete a person. Unknown ids succeed too."""
    service.remove(person_id)
    return Response(status_code=200)


_BAD_REQUEST = {400: {"model": ErrorPayload}}
_NOT_FOUND = {404: {"model": ErrorPayload}}
_TOO_MANY = {429: {"model": ErrorPayload}}

PERSON_ROUTES: list[tuple[str, str, Callable[..., Any], dict[str, Any]]] = [
    (
        "GET",
        "",
        list_persons,
        {
            "response_model": PersonPageResponse,
            "responses": {**_BAD_REQUEST, **_TOO_MANY},
            "summary": "List persons",
        },
    ),
    (
        "PUT",
        "",
        add_person,
        {
            "response_model": PersonResponse,
            "responses": {**_BAD_REQUEST, **_TOO_MANY},
            "summary": "Add a person",
        },
    ),
    (
        "GET",
        "/{person_id}",
        get_person,
        {
            "response_model": PersonResponse,
            "responses": {**_NOT_FOUND, **_TOO_MANY},
            "summary": "Get a person",
        },
    ),
    (
        "POST",
        "/{person_id}",
        update_person,
        {
            "response_model": PersonResponse,
            "responses": {**_BAD_REQUEST, **_NOT_FOUND, **_TOO_MANY},
            "summary": "Rename a person",
        },
    ),
    (
        "DELETE",
        "/{person_id}",
        remove_person,
        {
            "response_class": Response,
            "responses": _TOO_MANY,
            "summary": "Remove a person",
        },
    ),
]


def build_person_router(limiter: Limiter, rate_limit: str) -> APIRouter:
    """Build the person router from the PERSON_ROUTES table.

    Args:
        limiter: Limiter owning the request counters.
        rate_limit: Limit applied to each route, e.g. "60/minute".
    """
    router = APIRouter(prefix=PERSON_PREFIX, tags=["person"])
    for method, path, endpoint, options in PERSON_ROUTES:
        limited = limiter.limit(rate_limit)(endpoint)
        router.add_api_route(path, limited, methods=[method], **options)
    return router
