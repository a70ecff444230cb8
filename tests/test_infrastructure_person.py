"""
Tests for the SQL person repository.

Runs the adapter against an in-memory SQLite database.
"""

from app.domain.person.entities import PageRequest, Person, SortKey, SortOrder
from app.infrastructure.database import build_engine, create_schema


class TestInsertAndGet:
    def test_insert_assigns_increasing_ids(self, repository) -> None:
        first = repository.insert("TestA")
        second = repository.insert("TestB")

        assert first.id is not None
        assert second.id > first.id

    def test_get_by_id_returns_inserted_person(self, repository) -> None:
        person = repository.insert("TestA")

        assert repository.get_by_id(person.id) == Person(id=person.id, name="TestA")

    def test_get_by_id_missing(self, repository) -> None:
        assert repository.get_by_id(999) is None


class TestUpdateAndDelete:
    def test_update_writes_new_name(self, repository) -> None:
        person = repository.insert("TestA")
        person.name = "TestB"

        assert repository.update(person) == person
        assert repository.get_by_id(person.id).name == "TestB"

    def test_update_of_deleted_row_returns_none(self, repository) -> None:
        person = repository.insert("TestA")
        repository.delete_by_id(person.id)
        person.name = "TestB"

        assert repository.update(person) is None
        assert repository.get_by_id(person.id) is None

    def test_delete_removes_row(self, repository) -> None:
        person = repository.insert("TestA")

        repository.delete_by_id(person.id)

        assert repository.get_by_id(person.id) is None

    def test_delete_unknown_id_is_noop(self, repository) -> None:
        repository.insert("TestA")

        repository.delete_by_id(999)
        repository.delete_by_id(999)

        assert repository.list_page(PageRequest()).total_elements == 1


class TestListPage:
    def test_ordered_by_id_by_default(self, repository) -> None:
        ids = [repository.insert(name).id for name in ("Charlie", "Alpha", "Bravo")]

        page = repository.list_page(PageRequest())

        assert [p.id for p in page.content] == ids
        assert page.total_elements == 3

    def test_window(self, repository) -> None:
        for i in range(5):
            repository.insert(f"Test{i}")

        page = repository.list_page(PageRequest(page=1, size=2))

        assert [p.name for p in page.content] == ["Test2", "Test3"]
        assert page.total_elements == 5
        assert page.total_pages == 3

    def test_page_past_the_end_is_empty(self, repository) -> None:
        repository.insert("TestA")

        page = repository.list_page(PageRequest(page=4, size=10))

        assert page.content == []
        assert page.total_elements == 1

    def test_sort_by_name_descending(self, repository) -> None:
        for name in ("Bravo", "Alpha", "Charlie"):
            repository.insert(name)

        descending_name = SortOrder(SortKey.NAME, descending=True)
        page = repository.list_page(PageRequest(sort=(descending_name,)))

        assert [p.name for p in page.content] == ["Charlie", "Bravo", "Alpha"]

    def test_equal_names_fall_back_to_id(self, repository) -> None:
        first = repository.insert("Same")
        second = repository.insert("Same")

        page = repository.list_page(PageRequest(sort=(SortOrder(SortKey.NAME),)))

        assert [p.id for p in page.content] == [first.id, second.id]

    def test_multiple_sort_orders(self, repository) -> None:
        older = repository.insert("Same")
        repository.insert("Alpha")
        newer = repository.insert("Same")

        page = repository.list_page(
            PageRequest(
                sort=(
                    SortOrder(SortKey.NAME, descending=True),
                    SortOrder(SortKey.ID, descending=True),
                )
            )
        )

        assert [p.id for p in page.content][:2] == [newer.id, older.id]
        assert page.content[2].name == "Alpha"


class TestSchema:
    def test_create_schema_is_idempotent(self) -> None:
        engine = build_engine("sqlite://")
        create_schema(engine)
        create_schema(engine)
        engine.dispose()
