# tests/test_task_store.py

from __future__ import annotations

import uuid

import pytest

from oracle_focus.tasks.task_models import Priority, Task, TaskStatus
from oracle_focus.tasks.task_store import ChangeKind, StoreChange, TaskStore


def _titles(tasks: list[Task]) -> list[str]:
    return [t.title for t in tasks]


def test_empty_store_has_no_focus() -> None:
    store = TaskStore()
    assert len(store) == 0
    assert store.inbox_tasks() == []
    assert store.focus_task() is None


def test_inbox_then_focus_scenario() -> None:
    store = TaskStore()

    store.add_task_to_inbox("Buy milk", Priority.MEDIUM)
    inbox = store.inbox_tasks()
    assert len(inbox) == 1
    assert inbox[0].title == "Buy milk"

    store.add_task_and_focus("Call mom", Priority.URGENT)
    focus = store.focus_task()
    assert focus is not None
    assert focus.title == "Call mom"
    assert focus.priority is Priority.URGENT
    assert _titles(store.inbox_tasks()) == ["Call mom", "Buy milk"]


def test_add_to_inbox_appends_last() -> None:
    store = TaskStore()
    store.add_task_and_focus("first", Priority.LOW)
    store.add_task_to_inbox("second", Priority.HIGH)

    before = len(store.inbox_tasks())
    task = store.add_task_to_inbox("  third  ", Priority.CHILL)

    assert task is not None
    assert task.title == "third"
    assert task.status == TaskStatus.INBOX
    assert len(store.inbox_tasks()) == before + 1
    assert store.inbox_tasks()[-1] is task


@pytest.mark.parametrize("title", ["", "   ", "\t\n"])
def test_blank_titles_are_ignored(title: str) -> None:
    store = TaskStore()
    store.add_task_to_inbox("keep", Priority.MEDIUM)
    version = store.version

    assert store.add_task_to_inbox(title, Priority.MEDIUM) is None
    assert store.add_task_and_focus(title, Priority.URGENT) is None

    assert _titles(store.tasks()) == ["keep"]
    assert store.version == version


def test_mark_completed_keeps_length_and_leaves_inbox() -> None:
    store = TaskStore()
    a = store.add_task_to_inbox("a")
    b = store.add_task_to_inbox("b")
    assert a is not None and b is not None

    assert store.mark_completed(a) is True

    assert len(store) == 2
    assert store.inbox_tasks() == [b]
    assert store.focus_task() is b
    assert store.completed_tasks() == [a]
    assert a.status == TaskStatus.COMPLETED


def test_mark_completed_unknown_task_is_noop() -> None:
    store = TaskStore()
    store.add_task_to_inbox("a")
    stranger = Task(title="not mine")

    assert store.mark_completed(stranger) is False
    assert store.mark_completed(uuid.uuid4()) is False
    assert _titles(store.inbox_tasks()) == ["a"]
    assert stranger.status == TaskStatus.INBOX


def test_ids_are_unique_and_stable() -> None:
    store = TaskStore()
    tasks = [store.add_task_to_inbox(f"t{i}") for i in range(20)]
    ids = [t.id for t in tasks if t is not None]
    assert len(set(ids)) == 20

    first = tasks[0]
    assert first is not None
    original_id = first.id
    store.mark_completed(first)
    store.toggle_completed(first)
    assert first.id == original_id
    assert store.get(original_id) is first


def test_toggle_completed_round_trip() -> None:
    store = TaskStore()
    a = store.add_task_to_inbox("a")
    assert a is not None

    assert store.toggle_completed(a) is True
    assert a.is_completed
    assert store.focus_task() is None

    assert store.toggle_completed(a.id) is True
    assert a.status == TaskStatus.INBOX
    assert store.focus_task() is a

    assert store.toggle_completed(Task(title="x")) is False


def test_promote_to_focus_moves_inbox_task_to_front() -> None:
    store = TaskStore()
    a = store.add_task_to_inbox("a")
    b = store.add_task_to_inbox("b")
    c = store.add_task_to_inbox("c")
    assert a is not None and b is not None and c is not None

    assert store.promote_to_focus(c) is True
    assert _titles(store.tasks()) == ["c", "a", "b"]
    assert store.focus_task() is c

    store.mark_completed(b)
    assert store.promote_to_focus(b) is False
    assert _titles(store.tasks()) == ["c", "a", "b"]


def test_add_accepts_notes_and_due_date() -> None:
    from datetime import date

    store = TaskStore()
    task = store.add_task_to_inbox("report", Priority.HIGH, notes="weekly", due_at=date(2026, 1, 2))
    assert task is not None
    assert task.notes == "weekly"
    assert task.due_at == date(2026, 1, 2)
    assert task.created_at.tzinfo is not None


def test_subscribers_see_every_mutation_in_order() -> None:
    store = TaskStore()
    seen: list[StoreChange] = []
    unsubscribe = store.subscribe(seen.append)

    a = store.add_task_to_inbox("a")
    b = store.add_task_and_focus("b")
    assert a is not None and b is not None
    store.mark_completed(a)
    store.toggle_completed(a)
    store.promote_to_focus(a)
    store.mark_completed(Task(title="stranger"))

    assert [c.kind for c in seen] == [
        ChangeKind.ADDED,
        ChangeKind.FOCUSED,
        ChangeKind.COMPLETED,
        ChangeKind.REOPENED,
        ChangeKind.PROMOTED,
    ]
    assert [c.version for c in seen] == [1, 2, 3, 4, 5]
    assert seen[0].task is a
    assert store.version == 5

    unsubscribe()
    store.add_task_to_inbox("c")
    assert len(seen) == 5
    # calling twice is harmless
    unsubscribe()


def test_failing_listener_does_not_block_others_or_mutation() -> None:
    store = TaskStore()
    seen: list[StoreChange] = []

    def boom(change: StoreChange) -> None:
        raise RuntimeError("listener bug")

    store.subscribe(boom)
    store.subscribe(seen.append)

    task = store.add_task_to_inbox("a")
    assert task is not None
    assert store.inbox_tasks() == [task]
    assert len(seen) == 1


def test_tasks_returns_snapshot() -> None:
    store = TaskStore()
    store.add_task_to_inbox("a")
    snapshot = store.tasks()
    snapshot.clear()
    assert len(store) == 1
