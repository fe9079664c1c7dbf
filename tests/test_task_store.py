from datetime import datetime, timedelta, timezone

import pytest
from taskboard.core.types import ResultStatus, Task, TaskUpdate
from taskboard.server.services.task_store import TaskStore, parse_task_id


class FakeClock:
    def __init__(self):
        self.now = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, seconds=60):
        self.now += timedelta(seconds=seconds)


@pytest.fixture(name="clock")
def _clock_fixture():
    return FakeClock()


@pytest.fixture(name="store")
def _store_fixture(clock):
    return TaskStore(clock=clock)


def test_create_assigns_increasing_ids(store, clock):
    first = store.create("Buy milk")
    second = store.create("Walk dog")

    assert first.status == ResultStatus.CREATED
    assert first.ok
    assert isinstance(first.data, Task)
    assert first.data.id == 1
    assert first.data.is_completed is False
    assert first.data.created_at == clock.now
    assert first.data.updated_at is None
    assert second.data.id == 2


def test_create_trims_title(store):
    result = store.create("   Buy milk  ")
    assert result.data.title == "Buy milk"


@pytest.mark.parametrize("title", ["", "   ", None, 42, ["Buy milk"]])
def test_create_rejects_invalid_title(store, title):
    result = store.create(title)

    assert result.status == ResultStatus.VALIDATION_ERROR
    assert not result.ok
    assert result.data is None
    assert result.message == "Validation Error: The task title is required."
    assert len(store) == 0


def test_rejected_create_does_not_advance_counter(store):
    store.create("")
    store.create("   ")
    store.create(None)

    assert store.create("First").data.id == 1


def test_ids_are_never_reused_after_delete(store):
    created = store.create("Temporary")
    store.delete(created.data.id)

    assert store.create("Next").data.id == created.data.id + 1


def test_list_empty_store(store):
    result = store.list()

    assert result.status == ResultStatus.OK
    assert result.data == []


def test_list_preserves_creation_order(store):
    titles = ["one", "two", "three", "four"]
    for title in titles:
        store.create(title)

    listed = store.list().data
    assert [t.title for t in listed] == titles
    assert [t.id for t in listed] == [1, 2, 3, 4]


def test_get_by_id_accepts_int_and_numeric_string(store):
    store.create("Buy milk")

    assert store.get_by_id(1).data.title == "Buy milk"
    assert store.get_by_id("1").data.title == "Buy milk"
    assert store.get_by_id(" 1 ").data.title == "Buy milk"


@pytest.mark.parametrize("task_id", [2, "2", "abc", "", "1.5", None, True, 1.0])
def test_get_by_id_not_found(store, task_id):
    store.create("Buy milk")

    result = store.get_by_id(task_id)
    assert result.status == ResultStatus.NOT_FOUND
    assert result.message == f"Task ID {task_id} is not found"


def test_operations_on_deleted_task_are_not_found(store):
    store.create("Gone soon")
    assert store.delete(1).status == ResultStatus.DELETED

    assert store.get_by_id(1).status == ResultStatus.NOT_FOUND
    assert store.update(1, {"title": "Back"}).status == ResultStatus.NOT_FOUND
    assert store.delete(1).status == ResultStatus.NOT_FOUND


def test_update_completion_leaves_title(store, clock):
    store.create("Buy milk")
    clock.advance()

    result = store.update(1, {"is_completed": True})

    assert result.status == ResultStatus.OK
    assert result.data.title == "Buy milk"
    assert result.data.is_completed is True
    assert result.data.updated_at == clock.now
    assert result.data.created_at < result.data.updated_at


def test_update_title_is_trimmed(store):
    store.create("Buy milk")

    result = store.update("1", {"title": "  Buy oat milk "})
    assert result.data.title == "Buy oat milk"
    assert store.get_by_id(1).data.title == "Buy oat milk"


@pytest.mark.parametrize("title", ["", "   ", None, 7])
def test_invalid_title_aborts_whole_update(store, title):
    store.create("Buy milk")

    result = store.update(1, {"title": title, "is_completed": True})

    assert result.status == ResultStatus.VALIDATION_ERROR
    assert result.message == "Validation Error: Title cannot be empty."
    task = store.get_by_id(1).data
    assert task.title == "Buy milk"
    assert task.is_completed is False
    assert task.updated_at is None


@pytest.mark.parametrize("value", ["yes", 1, 0, None, "true"])
def test_non_boolean_completion_is_ignored(store, value):
    store.create("Buy milk")

    result = store.update(1, {"is_completed": value})

    assert result.status == ResultStatus.OK
    assert result.data.is_completed is False
    assert result.data.updated_at is not None


def test_update_ignores_unknown_fields(store):
    store.create("Buy milk")

    result = store.update(1, {"id": 99, "isCompleted": True, "created_at": "x"})

    assert result.status == ResultStatus.OK
    assert result.data.id == 1
    assert result.data.is_completed is False


def test_update_accepts_task_update(store):
    store.create("Buy milk")

    result = store.update(1, TaskUpdate(is_completed=True))
    assert result.data.is_completed is True


def test_task_update_tracks_presence():
    assert not TaskUpdate().has_title()
    assert TaskUpdate(title=None).has_title()
    update = TaskUpdate.from_mapping({"is_completed": "yes", "other": 1})
    assert update.has_is_completed()
    assert not update.has_title()
    assert update.is_completed == "yes"


def test_delete_missing_task(store):
    result = store.delete(5)

    assert result.status == ResultStatus.NOT_FOUND
    assert result.message == "Task ID 5 not found."


def test_delete_returns_no_payload(store):
    store.create("Buy milk")

    result = store.delete("1")
    assert result.status == ResultStatus.DELETED
    assert result.data is None
    assert len(store) == 0


def test_parse_task_id():
    assert parse_task_id(3) == 3
    assert parse_task_id("42") == 42
    assert parse_task_id("-1") == -1
    assert parse_task_id("4x") is None
    assert parse_task_id(False) is None
    assert parse_task_id(2.0) is None


def test_end_to_end_scenario(store):
    milk = store.create("Buy milk").data
    assert milk.id == 1
    assert milk.is_completed is False

    dog = store.create("Walk dog").data
    assert dog.id == 2

    assert store.delete(1).ok
    assert [t.id for t in store.list().data] == [2]

    updated = store.update(2, {"title": "Walk the dog", "is_completed": True}).data
    assert updated.id == 2
    assert updated.title == "Walk the dog"
    assert updated.is_completed is True
    assert updated.updated_at is not None

    assert store.delete(2).status == ResultStatus.DELETED
    assert store.list().data == []

    assert store.create("New").data.id == 3
