from __future__ import annotations

import pytest

from htmx_todo.render import HtmxAsset, render_item, render_list, style_for
from htmx_todo.store import TodoItem


@pytest.mark.parametrize(
    ("todo_id", "completed", "expected"),
    [
        (1, False, ";"),
        (2, False, ";background-color: darkgrey"),
        (1, True, "text-decoration: line-through;"),
        (2, True, "text-decoration: line-through;background-color: darkgrey"),
    ],
)
def test_style_for(todo_id: int, completed: bool, expected: str) -> None:
    item = TodoItem(id=todo_id, text="x", completed=completed)
    assert style_for(item) == expected


def test_render_item_fragment() -> None:
    html = render_item(TodoItem(id=2, text="New todo", completed=True))

    assert html == (
        '<li id="todo-item-2" hx-put="/todos/2" '
        'style="text-decoration: line-through;background-color: darkgrey" '
        'hx-swap="outerHTML">New todo</li>'
    )


def test_render_item_is_stable_across_renders() -> None:
    item = TodoItem(id=7, text="same")
    assert render_item(item) == render_item(item)


def test_render_item_escapes_text() -> None:
    html = render_item(TodoItem(id=1, text="<b>bold</b> & co"))

    assert "<b>" not in html
    assert "&lt;b&gt;bold&lt;/b&gt; &amp; co" in html


def test_render_list_empty_still_has_controls() -> None:
    html = render_list([])

    assert 'hx-post="/todos"' in html
    assert 'hx-target="#todo-list"' in html
    assert 'hx-swap="beforeend"' in html
    assert '<ul id="todo-list">' in html
    assert "<li" not in html
    assert "https://unpkg.com/htmx.org@1.9.2" in html


def test_render_list_keeps_given_order() -> None:
    items = [TodoItem(id=3, text="c"), TodoItem(id=1, text="a")]
    html = render_list(items)

    assert html.index('id="todo-item-3"') < html.index('id="todo-item-1"')
    for item in items:
        assert render_item(item) in html


def test_render_list_custom_htmx_without_integrity() -> None:
    html = render_list([], htmx=HtmxAsset(src="/static/htmx.min.js", integrity=None))

    assert 'src="/static/htmx.min.js"' in html
    assert "integrity=" not in html
