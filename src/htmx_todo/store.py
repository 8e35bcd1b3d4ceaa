from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace

from htmx_todo.errors import IdSpaceExhausted, TodoNotFound

logger = logging.getLogger(__name__)

MAX_TODO_ID = 2**64 - 1


@dataclass(frozen=True)
class TodoItem:
    id: int
    text: str
    completed: bool = False

    def toggled(self) -> TodoItem:
        return replace(self, completed=not self.completed)


class TodoStore:
    """In-memory todo collection shared by all request handlers.

    A single lock guards both the id counter and the mapping, so id allocation
    plus insertion (create) and lookup plus flip plus write-back (toggle) are
    each atomic. Items are immutable; callers always receive values they cannot
    use to mutate the store.
    """

    def __init__(self, *, max_id: int = MAX_TODO_ID) -> None:
        if max_id < 1:
            raise ValueError("max_id must be >= 1")
        self._lock = threading.Lock()
        self._todos: dict[int, TodoItem] = {}
        self._next_id = 1
        self._max_id = max_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._todos)

    @property
    def next_id(self) -> int:
        with self._lock:
            return self._next_id

    def list_all(self) -> list[TodoItem]:
        with self._lock:
            items = list(self._todos.values())
        items.sort(key=lambda t: t.id)
        return items

    def get(self, todo_id: int) -> TodoItem:
        with self._lock:
            item = self._todos.get(todo_id)
        if item is None:
            raise TodoNotFound(todo_id)
        return item

    def create(self, text: str) -> TodoItem:
        with self._lock:
            todo_id = self._next_id
            if todo_id > self._max_id:
                raise IdSpaceExhausted(self._max_id)
            assert todo_id not in self._todos, f"todo id {todo_id} allocated twice"
            item = TodoItem(id=todo_id, text=text, completed=False)
            self._todos[todo_id] = item
            self._next_id = todo_id + 1

        logger.debug("Created todo %s", item.id)
        return item

    def toggle(self, todo_id: int) -> TodoItem:
        with self._lock:
            current = self._todos.get(todo_id)
            if current is not None:
                updated = current.toggled()
                self._todos[todo_id] = updated

        if current is None:
            logger.info("Toggle requested for unknown todo %s", todo_id)
            raise TodoNotFound(todo_id)

        logger.debug("Toggled todo %s -> completed=%s", todo_id, updated.completed)
        return updated
