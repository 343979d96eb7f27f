# tests/test_commands.py

from __future__ import annotations

from datetime import datetime

import pytest

from yarr.core import persona
from yarr.core.commands import (
    AddCommand,
    DeleteCommand,
    ExitCommand,
    FindCommand,
    ListCommand,
    ToggleMarkCommand,
    execute_command,
)
from yarr.core.errors import IndexOutOfRange
from yarr.core.parser import parse_command
from yarr.tasks.task_list import TaskList
from yarr.tasks.task_models import Deadline, Todo

from .fakes import FakeUi, FlakyTaskStore


@pytest.fixture()
def three() -> TaskList:
    return TaskList([Todo("read book"), Deadline("return book", by=datetime(2024, 12, 20, 18, 0)), Todo("buy rum")])


def test_add_appends_persists_and_reports(state, ui: FakeUi) -> None:
    result = execute_command(AddCommand(Todo("swab the deck")), state.tasks, state.task_store, ui)

    assert state.tasks.count == 1
    assert state.task_store.load_tasks() == [Todo("swab the deck")]
    assert result.persisted is True
    assert "[T][ ] swab the deck" in result.message
    assert "1 task in the log" in result.message
    assert ui.messages == [result.message]


def test_mark_then_unmark_restores_state(three: TaskList, ui: FakeUi) -> None:
    store = FlakyTaskStore()
    before = [str(t) for t in three]

    r1 = execute_command(ToggleMarkCommand(2, True), three, store, ui)
    assert three.get(2).is_done is True
    assert "[D][X] return book" in r1.message
    assert store.saved[1].is_done is True

    execute_command(ToggleMarkCommand(2, False), three, store, ui)
    assert [str(t) for t in three] == before
    assert store.save_calls == 2


@pytest.mark.parametrize("index", [0, 4, 99])
def test_toggle_out_of_range(three: TaskList, ui: FakeUi, index: int) -> None:
    store = FlakyTaskStore()
    with pytest.raises(IndexOutOfRange):
        execute_command(ToggleMarkCommand(index, True), three, store, ui)
    assert store.save_calls == 0
    assert ui.messages == []


def test_delete_removes_exactly_one_and_shifts(three: TaskList, ui: FakeUi) -> None:
    store = FlakyTaskStore()
    result = execute_command(DeleteCommand(1), three, store, ui)

    assert three.count == 2
    assert [t.description for t in three] == ["return book", "buy rum"]
    assert [t.description for t in store.saved] == ["return book", "buy rum"]
    assert result.message == persona.task_deleted("[T][ ] read book", 2)
    assert "walked the plank" in result.message
    assert "Only 2 tasks remain" in result.message


def test_delete_out_of_range_fails_at_execute_time(three: TaskList, ui: FakeUi) -> None:
    command = parse_command("delete 99")
    with pytest.raises(IndexOutOfRange):
        execute_command(command, three, FlakyTaskStore(), ui)
    assert three.count == 3


def test_list(three: TaskList, ui: FakeUi) -> None:
    result = execute_command(ListCommand(), three, FlakyTaskStore(), ui)
    lines = result.message.splitlines()
    assert lines[1] == "1. [T][ ] read book"
    assert lines[2] == "2. [D][ ] return book (by: 20 Dec 2024 18:00)"
    assert lines[3] == "3. [T][ ] buy rum"
    assert result.persisted is None


def test_list_empty(ui: FakeUi) -> None:
    result = execute_command(ListCommand(), TaskList(), FlakyTaskStore(), ui)
    assert "empty" in result.message


def test_find_is_ordered_subsequence(three: TaskList, ui: FakeUi) -> None:
    store = FlakyTaskStore()
    result = execute_command(FindCommand("book"), three, store, ui)
    lines = result.message.splitlines()
    assert lines[1:] == ["1. [T][ ] read book", "2. [D][ ] return book (by: 20 Dec 2024 18:00)"]
    assert store.save_calls == 0


def test_find_nothing_is_not_an_error(three: TaskList, ui: FakeUi) -> None:
    result = execute_command(FindCommand("Book"), three, FlakyTaskStore(), ui)
    assert result.message == persona.find_results([])


def test_exit(three: TaskList, ui: FakeUi) -> None:
    result = execute_command(ExitCommand(), three, FlakyTaskStore(), ui)
    assert result.is_exit is True
    assert result.message == persona.FAREWELL
    assert three.count == 3


def test_failed_save_keeps_mutation_and_warns(three: TaskList, ui: FakeUi) -> None:
    store = FlakyTaskStore(fail_saves=1)
    result = execute_command(AddCommand(Todo("bury treasure")), three, store, ui)

    assert three.count == 4
    assert result.persisted is False
    assert result.message.endswith(persona.SAVE_FAILED)
    assert store.saved == []
