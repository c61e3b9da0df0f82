"""Tests for the in-memory task store."""
from task_api.store import TaskStore


class TestTaskStore:
    """Test suite for TaskStore."""

    def test_seeded_titles(self):
        store = TaskStore(["a", "b"])
        assert [(task.id, task.title) for task in store.list()] == [(1, "a"), (2, "b")]

    def test_returned_tasks_are_copies(self):
        """Mutating a returned task does not change the stored one."""
        store = TaskStore(["a"])
        task = store.get(1)
        task.completed = True
        assert store.get(1).completed is False

    def test_toggle_and_delete_unknown(self):
        store = TaskStore()
        assert store.toggle(1) is None
        assert store.delete(1) is False
        assert store.get(1) is None

    def test_reset_restores_seed_and_counter(self):
        store = TaskStore(["a"])
        store.create("b")
        store.delete(1)
        store.reset()

        assert [(task.id, task.title) for task in store.list()] == [(1, "a")]
        assert store.create("c").id == 2
