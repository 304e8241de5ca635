"""In-memory todo storage for the demo server.

One TodoStore is created per application and handed to the route handlers,
so tests and parallel app instances never share state. All operations hold
a lock: request handlers may run concurrently in a threadpool.

"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Todo:
    id: int
    text: str


class TodoStore:
    """Ordered todo list with monotonically increasing ids.

    Ids start at 1 and are never reused, not even after clear(), so a stale
    delete button can never remove a newer item.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._todos: list[Todo] = []
        self._last_id = 0

    def add(self, text: str) -> Todo:
        with self._lock:
            self._last_id += 1
            todo = Todo(id=self._last_id, text=text)
            self._todos.append(todo)
        logger.info("Added todo %d", todo.id)
        return todo

    def list(self) -> list[Todo]:
        """Snapshot of the current todos in insertion order."""
        with self._lock:
            return list(self._todos)

    def remove(self, todo_id: int) -> bool:
        """Remove the todo with *todo_id*; return False if there was none."""
        with self._lock:
            for index, todo in enumerate(self._todos):
                if todo.id == todo_id:
                    del self._todos[index]
                    break
            else:
                return False
        logger.info("Removed todo %d", todo_id)
        return True

    def clear(self) -> int:
        """Remove every todo; return how many were removed."""
        with self._lock:
            count = len(self._todos)
            self._todos = []
        logger.info("Cleared %d todos", count)
        return count

    def __len__(self) -> int:
        with self._lock:
            return len(self._todos)


__all__ = ["Todo", "TodoStore"]
