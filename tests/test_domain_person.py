"""
Tests for the person domain layer.

Tests the naming grammar, entities and error classes in isolation.
No external dependencies or IO required.
"""

import pytest

from app.domain.person.entities import Page, PageRequest, Person, SortKey, SortOrder
from app.domain.person.errors import (
    InvalidNameError,
    MissingParameterError,
    PersonDomainError,
    PersonNotFoundError,
)
from app.domain.person.name_validator import (
    VALID,
    NameValidation,
    NameViolation,
    validate_name,
)


class TestValidateName:
    """Tests for validate_name and its rule precedence."""

    @pytest.mark.parametrize(
        "name",
        [
            "T",
            "Test",
            "TestA",
            "John Smith",
            "Anne-Marie",
            "J. R. R. Tolkien",
            "Agent 007",
            "A" * 50,
        ],
    )
    def test_grammatical_names_are_valid(self, name: str) -> None:
        assert validate_name(name) == VALID
        assert validate_name(name).is_valid

    def test_empty_name(self) -> None:
        assert validate_name("") == NameValidation(NameViolation.EMPTY)

    def test_lowercase_first_letter(self) -> None:
        assert validate_name("test").violation is NameViolation.BAD_GRAMMAR

    def test_illegal_character(self) -> None:
        assert validate_name("Test=").violation is NameViolation.BAD_GRAMMAR

    @pytest.mark.parametrize("name", ["1Test", " Test", "-Test", "Ünal", "Test_A", "Tést"])
    def test_other_bad_grammar(self, name: str) -> None:
        assert validate_name(name).violation is NameViolation.BAD_GRAMMAR

    def test_trailing_newline_is_rejected(self) -> None:
        assert validate_name("Test\n").violation is NameViolation.BAD_GRAMMAR

    def test_long_legal_name_is_too_long(self) -> None:
        name = "A" + "b" * 53
        assert len(name) == 54
        assert validate_name(name).violation is NameViolation.TOO_LONG

    def test_fifty_one_characters_is_too_long(self) -> None:
        assert validate_name("A" * 51).violation is NameViolation.TOO_LONG

    def test_grammar_is_checked_before_length(self) -> None:
        name = "A" * 60 + "="
        assert validate_name(name).violation is NameViolation.BAD_GRAMMAR

    def test_invalid_outcome_is_not_valid(self) -> None:
        assert not validate_name("").is_valid


class TestNameViolationMessages:
    """The client-facing messages are part of the API contract."""

    def test_empty_message(self) -> None:
        assert NameViolation.EMPTY.message == "Invalid name! The name must not be empty!"

    def test_bad_grammar_message(self) -> None:
        assert NameViolation.BAD_GRAMMAR.message == (
            "Invalid name! The name must contain Latin characters, numbers, "
            "signs '-', '.' and start with a capital letter!"
        )

    def test_too_long_message(self) -> None:
        assert NameViolation.TOO_LONG.message == (
            "Invalid name! The name must be no longer than 50 characters!"
        )


class TestPageEntities:
    """Tests for PageRequest and Page."""

    def test_default_page_request(self) -> None:
        request = PageRequest()
        assert request.page == 0
        assert request.size == 20
        assert request.sort == (SortOrder(SortKey.ID),)
        assert request.sort[0].descending is False

    def test_offset(self) -> None:
        assert PageRequest(page=3, size=10).offset == 30

    def test_page_metadata(self) -> None:
        page = Page(content=[Person(id=3, name="C")], page=1, size=2, total_elements=3)
        assert page.total_pages == 2
        assert page.number_of_elements == 1
        assert page.first is False
        assert page.last is True

    def test_empty_page(self) -> None:
        page = Page(content=[], page=0, size=20, total_elements=0)
        assert page.total_pages == 0
        assert page.first is True
        assert page.last is True


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_person_not_found_error_message(self) -> None:
        error = PersonNotFoundError(999)
        assert error.message == "Person 999 not found."
        assert error.person_id == 999

    def test_invalid_name_error_carries_violation(self) -> None:
        error = InvalidNameError(NameViolation.TOO_LONG)
        assert error.violation is NameViolation.TOO_LONG
        assert error.message == NameViolation.TOO_LONG.message

    def test_missing_parameter_error_message(self) -> None:
        error = MissingParameterError("name")
        assert error.message == "Required String parameter 'name' is not present"

    def test_errors_share_a_base(self) -> None:
        assert issubclass(PersonNotFoundError, PersonDomainError)
        assert issubclass(InvalidNameError, PersonDomainError)
        assert issubclass(MissingParameterError, PersonDomainError)
