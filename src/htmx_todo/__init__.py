from htmx_todo.errors import IdSpaceExhausted, TodoError, TodoNotFound
from htmx_todo.store import TodoItem, TodoStore

__version__ = "0.1.0"

__all__ = [
    "IdSpaceExhausted",
    "TodoError",
    "TodoItem",
    "TodoNotFound",
    "TodoStore",
    "__version__",
]
