"""
Domain-specific errors for the person bounded context.

All errors raised for person operations must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from app.domain.person.name_validator import NameViolation


class PersonDomainError(Exception):
    """Base error for all person domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class PersonNotFoundError(PersonDomainError):
    """Raised when no person exists with the requested id."""

    def __init__(self, person_id: int) -> None:
        super().__init__(f"Person {person_id} not found.")
        self.person_id = person_id


class InvalidNameError(PersonDomainError):
    """Raised when a name does not conform to the naming grammar."""

    def __init__(self, violation: NameViolation) -> None:
        super().__init__(violation.message)
        self.violation = violation


class MissingParameterError(PersonDomainError):
    """Raised when a required request parameter is absent."""

    def __init__(self, parameter: str) -> None:
        super().__init__(f"Required String parameter '{parameter}' is not present")
        self.parameter = parameter
