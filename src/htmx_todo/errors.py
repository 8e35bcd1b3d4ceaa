from __future__ import annotations


class TodoError(Exception):
    """Base class for todo store failures."""


class TodoNotFound(TodoError):
    def __init__(self, todo_id: int) -> None:
        super().__init__(f"Todo {todo_id} not found")
        self.todo_id = todo_id


class IdSpaceExhausted(TodoError):
    """The id counter ran past the configured maximum.

    Not recoverable: the store cannot create any further todos.
    """

    def __init__(self, max_id: int) -> None:
        super().__init__(f"Todo id space exhausted (max_id={max_id})")
        self.max_id = max_id
