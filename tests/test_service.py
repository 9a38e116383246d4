"""Tests for TaskListManager."""

import pytest
from task_list.exceptions import InvalidArgumentError, InvalidTaskError, OutOfRangeError
from task_list.models import Task, TaskKind
from task_list.service import EMPTY_LIST_MESSAGE, TaskListManager


@pytest.fixture
def populated(manager):
    """Manager holding three tasks."""
    manager.add("read book")
    manager.add("write report")
    manager.add("return book", TaskKind.DEADLINE, "Sunday")
    return manager


class TestAdd:
    """Tests for adding tasks."""

    def test_add_message(self, manager):
        message = manager.add("read book")

        assert message == (
            "Got it. I've added this task:\n"
            "  [ ] read book\n"
            "Now you have 1 task in the list."
        )

    def test_add_counts_plural(self, manager):
        manager.add("read book")
        message = manager.add("write report")

        assert message.endswith("Now you have 2 tasks in the list.")
        assert len(manager) == 2

    def test_add_empty_raises(self, manager):
        with pytest.raises(InvalidTaskError):
            manager.add("   ")
        assert len(manager) == 0

    def test_add_kind(self, manager):
        manager.add("return book", TaskKind.DEADLINE, "Sunday")

        task = manager.tasks[0]
        assert task.kind == TaskKind.DEADLINE
        assert task.timing == "Sunday"


class TestListAll:
    """Tests for listing tasks."""

    def test_empty_list(self, manager):
        assert manager.list_all() == [EMPTY_LIST_MESSAGE]

    def test_insertion_order(self, manager):
        descriptions = ["a", "b", "c", "d"]
        for description in descriptions:
            manager.add(description)

        assert manager.list_all() == ["1.[ ] a", "2.[ ] b", "3.[ ] c", "4.[ ] d"]

    def test_scenario(self, manager):
        manager.add("read book")
        manager.add("write report")
        assert manager.list_all() == ["1.[ ] read book", "2.[ ] write report"]

        manager.mark_done(1)
        assert manager.list_all() == ["1.[X] read book", "2.[ ] write report"]

        manager.delete(1)
        assert manager.list_all() == ["1.[ ] write report"]


class TestMarkDone:
    """Tests for marking tasks done."""

    def test_mark_done(self, populated):
        message = populated.mark_done(2)

        assert message == "Nice! I've marked this task as done:\n  [X] write report"
        assert [t.is_done for t in populated.tasks] == [False, True, False]

    def test_mark_done_twice(self, populated):
        populated.mark_done(1)
        populated.mark_done(1)

        assert populated.list_all()[0] == "1.[X] read book"

    @pytest.mark.parametrize("index", [0, -1, 4, 100])
    def test_out_of_range(self, populated, index):
        with pytest.raises(OutOfRangeError) as exc_info:
            populated.mark_done(index)

        assert exc_info.value.index == index
        assert exc_info.value.size == 3
        assert not any(t.is_done for t in populated.tasks)

    def test_empty_list(self, manager):
        with pytest.raises(OutOfRangeError, match="has 0 tasks"):
            manager.mark_done(1)


class TestDelete:
    """Tests for deleting tasks."""

    def test_delete(self, populated):
        message = populated.delete(1)

        assert message == (
            "Noted. I've removed this task:\n"
            "  [ ] read book\n"
            "Now you have 2 tasks in the list."
        )
        assert populated.list_all() == [
            "1.[ ] write report",
            "2.[ ] return book (by: Sunday)",
        ]

    def test_delete_uses_shifted_numbering(self, populated):
        populated.delete(1)
        populated.delete(1)

        assert [t.description for t in populated.tasks] == ["return book"]

    def test_delete_last_leaves_empty(self, manager):
        manager.add("only")
        message = manager.delete(1)

        assert message.endswith("Now you have 0 tasks in the list.")
        assert manager.list_all() == [EMPTY_LIST_MESSAGE]

    @pytest.mark.parametrize("index", [0, 4])
    def test_out_of_range(self, populated, index):
        with pytest.raises(OutOfRangeError):
            populated.delete(index)
        assert len(populated) == 3


class TestFind:
    """Tests for searching tasks."""

    def test_find_keeps_original_numbers(self, populated):
        message = populated.find("book")

        assert message == (
            "Here are the matching tasks in your list:\n"
            "1.[ ] read book\n"
            "3.[ ] return book (by: Sunday)"
        )

    def test_find_matches_decoration(self, populated):
        assert "3.[ ] return book (by: Sunday)" in populated.find("Sunday")

    def test_find_is_case_sensitive(self, populated):
        assert populated.find("Book") == 'No tasks match "Book".'

    def test_find_no_matches(self, populated):
        assert populated.find("zzz") == 'No tasks match "zzz".'

    def test_find_empty_keyword_raises(self, populated):
        with pytest.raises(InvalidArgumentError):
            populated.find("")


class TestLoad:
    """Tests for reloading saved tasks."""

    def test_load_appends(self, manager):
        done = Task(description="saved", is_done=True)
        manager.load([done, Task(description="also saved")])

        assert manager.list_all() == ["1.[X] saved", "2.[ ] also saved"]

    def test_constructor_loads(self):
        manager = TaskListManager([Task(description="saved")])
        assert len(manager) == 1

    def test_tasks_snapshot_is_read_only(self, populated):
        assert isinstance(populated.tasks, tuple)
