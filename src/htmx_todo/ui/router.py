from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request
from fastapi.responses import HTMLResponse

from htmx_todo.config import TodoConfig
from htmx_todo.render import HtmxAsset, render_item, render_list
from htmx_todo.store import TodoStore

router = APIRouter(tags=["ui"])


def get_store(request: Request) -> TodoStore:
    return request.app.state.todo_store


def get_config(request: Request) -> TodoConfig:
    return request.app.state.todo_config


StoreDep = Annotated[TodoStore, Depends(get_store)]
ConfigDep = Annotated[TodoConfig, Depends(get_config)]


# Handlers are sync on purpose: Starlette runs them on its thread pool, and the
# store lock serializes the mutations.


@router.get("/", response_class=HTMLResponse)
def ui_index(store: StoreDep, config: ConfigDep) -> HTMLResponse:
    items = store.list_all()
    htmx = HtmxAsset(src=config.ui.htmx_src, integrity=config.ui.htmx_integrity)
    return HTMLResponse(render_list(items, htmx=htmx))


@router.post("/todos", response_class=HTMLResponse)
def ui_create_todo(store: StoreDep, config: ConfigDep) -> HTMLResponse:
    item = store.create(config.todos.default_text)
    return HTMLResponse(render_item(item))


@router.put("/todos/{todo_id}", response_class=HTMLResponse)
def ui_toggle_todo(
    store: StoreDep, todo_id: Annotated[int, Path(ge=0)]
) -> HTMLResponse:
    item = store.toggle(todo_id)
    return HTMLResponse(render_item(item))
