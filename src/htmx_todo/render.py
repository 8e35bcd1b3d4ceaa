"""HTML rendering for todos.

Every function here is pure: the same todo (or list of todos) always yields the
same markup. Markup lives in Jinja2 templates under ``ui/templates``; the style
derivation is kept in :func:`style_for` so it can be reasoned about without any
template involved.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

from fastapi.templating import Jinja2Templates

from htmx_todo.store import TodoItem

TEMPLATES_DIR = Path(__file__).resolve().parent / "ui" / "templates"

DEFAULT_HTMX_SRC = "https://unpkg.com/htmx.org@1.9.2"
DEFAULT_HTMX_INTEGRITY = "sha384-L6OqL9pRWyyFU3+/bjdSri+iIphTN/bvYyM37tICVyOJkWZLpP2vGn6VUEXgzg6h"

# Ordered (condition, declaration) slots. Slots whose condition is false still
# occupy their position in the joined output.
STYLE_RULES: tuple[tuple[Callable[[TodoItem], bool], str], ...] = (
    (lambda item: item.completed, "text-decoration: line-through"),
    (lambda item: item.id % 2 == 0, "background-color: darkgrey"),
)


@dataclass(frozen=True)
class HtmxAsset:
    src: str = DEFAULT_HTMX_SRC
    integrity: str | None = DEFAULT_HTMX_INTEGRITY


def style_for(item: TodoItem) -> str:
    """Inline style for a todo, one slot per rule joined with ``;``.

    >>> style_for(TodoItem(id=1, text="x"))
    ';'
    """

    return ";".join(decl if cond(item) else "" for cond, decl in STYLE_RULES)


def element_id(item: TodoItem) -> str:
    return f"todo-item-{item.id}"


def toggle_url(item: TodoItem) -> str:
    return f"/todos/{item.id}"


templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["todo_style"] = style_for
templates.env.filters["todo_element_id"] = element_id
templates.env.filters["todo_toggle_url"] = toggle_url


def render_item(item: TodoItem) -> str:
    return templates.get_template("todo_item.html").render(item=item)


def render_list(items: Iterable[TodoItem], *, htmx: HtmxAsset | None = None) -> str:
    """Render the full page: the add button and one fragment per todo.

    Items are emitted in the order given; callers sort.
    """

    return templates.get_template("index.html").render(
        items=list(items),
        htmx=htmx or HtmxAsset(),
    )
