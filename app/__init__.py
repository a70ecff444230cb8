"""
Person Registry: CRUD service for person records.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - person: Person records, the naming grammar, paginated listing.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Services orchestrating the domain.
    - infrastructure: Adapters (SQLAlchemy) implementing domain ports.
    - interfaces: FastAPI routes, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
