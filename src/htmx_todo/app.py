from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from htmx_todo import __version__
from htmx_todo.api.models import error_response
from htmx_todo.config import TodoConfig, load_config
from htmx_todo.errors import IdSpaceExhausted, TodoNotFound
from htmx_todo.store import TodoStore
from htmx_todo.ui.router import router as ui_router

logger = logging.getLogger(__name__)


def _status_to_code(status_code: int) -> str:
    if status_code == 404:
        return "not_found"
    if status_code == 405:
        return "method_not_allowed"
    if status_code == 422:
        return "validation_error"
    if 400 <= status_code < 500:
        return "client_error"
    return "server_error"


def create_app(config: TodoConfig | None = None, store: TodoStore | None = None) -> FastAPI:
    """Build the application around an explicitly constructed store.

    Both arguments are optional; a fresh store sized from the config is created
    when none is given, so every app instance owns its own collection.
    """

    if config is None:
        config = load_config()
    if store is None:
        store = TodoStore(max_id=config.todos.max_id)

    app = FastAPI(title="htmx-todo", version=__version__)
    app.state.todo_config = config
    app.state.todo_store = store

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        logger.info(f"{request.method} {request.url.path} - {response.status_code}")
        return response

    @app.exception_handler(TodoNotFound)
    async def _todo_not_found_handler(request: Request, exc: TodoNotFound) -> JSONResponse:
        return error_response(
            404, code="not_found", message=str(exc), details={"todo_id": exc.todo_id}
        )

    @app.exception_handler(IdSpaceExhausted)
    async def _id_space_exhausted_handler(
        request: Request, exc: IdSpaceExhausted
    ) -> JSONResponse:
        logger.error("Cannot create todo: %s", exc)
        return error_response(500, code="server_error", message="Todo id space exhausted")

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return error_response(
            422,
            code="validation_error",
            message="Request validation failed",
            details=exc.errors(),
        )

    @app.exception_handler(StarletteHTTPException)
    async def _starlette_http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return error_response(
            exc.status_code,
            code=_status_to_code(exc.status_code),
            message=exc.detail if isinstance(exc.detail, str) else "HTTP error",
        )

    @app.exception_handler(Exception)
    async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        # Avoid leaking internals to the client; the traceback goes to the log.
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(500, code="internal_error", message="Internal server error")

    app.include_router(ui_router)

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    return app
