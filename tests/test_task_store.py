# tests/test_task_store.py

from __future__ import annotations

import dataclasses

import pytest

from tasklist.tasks.task_errors import InvalidInput, TaskError, TaskNotFound
from tasklist.tasks.task_models import Task
from tasklist.tasks.task_store import TaskStore


def test_new_store_is_empty(store: TaskStore) -> None:
    assert store.list_tasks() == []
    assert store.list_completed_tasks() == []
    assert store.next_id == 1
    assert store.count_tasks() == 0


@pytest.mark.parametrize("description", ["Buy milk", "  padded  ", "x", "Ünïcödé ✓"])
def test_add_task_appends_with_next_id(store: TaskStore, description: str) -> None:
    store.add_task("first")
    before = store.next_id

    task = store.add_task(description)

    assert task == Task(id=before, description=description, completed=False)
    assert store.count_tasks() == 2
    assert store.next_id == before + 1
    assert store.list_tasks()[-1] == task


def test_add_task_keeps_description_untrimmed(store: TaskStore) -> None:
    store.add_task("  Walk dog \n")
    assert store.get_task(1).description == "  Walk dog \n"


@pytest.mark.parametrize("description", ["", " ", "      ", "\t\n  "])
def test_add_blank_task_rejected_and_store_unchanged(store: TaskStore, description: str) -> None:
    store.add_task("keep me")

    with pytest.raises(InvalidInput) as exc_info:
        store.add_task(description)

    assert str(exc_info.value) == "Invalid Input: Task description cannot be empty"
    assert isinstance(exc_info.value, ValueError)
    assert store.list_tasks() == [Task(1, "keep me", False)]
    assert store.next_id == 2


def test_complete_task_is_idempotent(store: TaskStore) -> None:
    store.add_task("a")
    store.add_task("b")

    first = store.complete_task(2)
    second = store.complete_task(2)

    assert first == second == Task(2, "b", True)
    assert store.list_tasks() == [Task(1, "a", False), Task(2, "b", True)]
    assert store.next_id == 3


def test_complete_missing_task_raises_and_store_unchanged(store: TaskStore) -> None:
    store.add_task("a")

    with pytest.raises(TaskNotFound) as exc_info:
        store.complete_task(100)

    assert exc_info.value.task_id == 100
    assert str(exc_info.value) == "Task with ID 100 not found"
    assert isinstance(exc_info.value, TaskError)
    assert store.list_tasks() == [Task(1, "a", False)]


def test_remove_task_preserves_order_of_others(store: TaskStore) -> None:
    for d in ("one", "two", "three", "four"):
        store.add_task(d)
    store.complete_task(3)

    removed = store.remove_task(2)

    assert removed == Task(2, "two", False)
    assert store.list_tasks() == [
        Task(1, "one", False),
        Task(3, "three", True),
        Task(4, "four", False),
    ]
    assert store.next_id == 5


def test_remove_missing_task_raises(store: TaskStore) -> None:
    store.add_task("a")

    with pytest.raises(TaskNotFound) as exc_info:
        store.remove_task(2)

    assert exc_info.value.task_id == 2
    assert store.count_tasks() == 1


def test_ids_are_not_reused_after_removal(store: TaskStore) -> None:
    for d in ("Task 1", "Task 2", "Task 3"):
        store.add_task(d)
    store.remove_task(2)

    task = store.add_task("Task 4")

    assert task.id == 4
    assert [t.id for t in store.list_tasks()] == [1, 3, 4]


def test_removing_last_task_does_not_rewind_counter(store: TaskStore) -> None:
    store.add_task("only")
    store.remove_task(1)

    assert store.list_tasks() == []
    assert store.add_task("next").id == 2


def test_buy_milk_walk_dog_scenario(store: TaskStore) -> None:
    store.add_task("Buy milk")
    store.add_task("Walk dog")
    store.complete_task(1)

    assert store.list_tasks() == [Task(1, "Buy milk", True), Task(2, "Walk dog", False)]
    assert store.list_completed_tasks() == [Task(1, "Buy milk", True)]


def test_kitchen_sink(store: TaskStore) -> None:
    store.add_task("Task 1")
    store.add_task("Task 2")
    store.add_task("Task 3")
    assert [t.description for t in store.list_tasks()] == ["Task 1", "Task 2", "Task 3"]

    store.remove_task(2)
    assert store.count_tasks() == 2

    store.complete_task(3)
    assert store.list_tasks()[1].completed is True

    with pytest.raises(TaskNotFound):
        store.complete_task(100)


def test_listed_tasks_cannot_change_the_store(store: TaskStore) -> None:
    store.add_task("a")
    listed = store.list_tasks()

    listed.clear()
    with pytest.raises(dataclasses.FrozenInstanceError):
        store.get_task(1).completed = True  # type: ignore[misc]

    assert store.list_tasks() == [Task(1, "a", False)]


def test_list_completed_keeps_insertion_order(store: TaskStore) -> None:
    for d in ("a", "b", "c", "d"):
        store.add_task(d)
    store.complete_task(4)
    store.complete_task(2)

    assert [t.id for t in store.list_completed_tasks()] == [2, 4]


def test_get_task_missing_raises(store: TaskStore) -> None:
    with pytest.raises(TaskNotFound):
        store.get_task(1)
