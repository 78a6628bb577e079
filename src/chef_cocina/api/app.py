"""FastAPI application factory."""

import logging
import time
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from chef_cocina.api.chat_models import ChatRequest, ChatResponse, HistoryResponse
from chef_cocina.app_logging import configure_logging
from chef_cocina.containers import AppContainer
from chef_cocina.domain.errors import ChefError
from chef_cocina.persona import INVALID_MESSAGE_ERROR

DEFAULT_SESSION_ID = "default"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s %s in %.0fms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    @app.exception_handler(ChefError)
    async def chef_error_handler(request: Request, exc: ChefError) -> JSONResponse:
        state_container: AppContainer = request.app.state.container
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": _format_error(state_container, exc)},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info("Rejected chat request", extra={"errors": exc.errors()})
        return JSONResponse(status_code=400, content={"error": INVALID_MESSAGE_ERROR})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/chat")
    async def chat(body: ChatRequest, request: Request) -> ChatResponse:
        """Send a user message and return the assistant reply."""
        state_container: AppContainer = request.app.state.container
        session_id = body.session_id or _client_session_id(request)
        reply = await state_container.chat_service.handle_user_message(
            session_id, body.message
        )
        await state_container.recipe_service.process_reply(reply)
        return ChatResponse(reply=reply)

    @app.get("/history/{session_id}")
    async def history(session_id: str, request: Request) -> HistoryResponse:
        """Return the messages stored for a session."""
        state_container: AppContainer = request.app.state.container
        messages = state_container.history_service.get_history(session_id)
        return HistoryResponse.model_validate({"messages": messages})

    return app


def _client_session_id(request: Request) -> str:
    """Derive a session id from the client address when none was sent."""
    if request.client and request.client.host:
        return f"ip-{request.client.host}"
    return DEFAULT_SESSION_ID


def _format_error(state_container: AppContainer, exc: ChefError) -> str:
    """Return the client-facing error text with local debug info."""
    if state_container.settings.environment == "local" and exc.__cause__ is not None:
        cause = exc.__cause__
        detail = f"{type(cause).__name__}: {cause}".strip()
        return f"{exc.message} (debug: {detail})"
    return exc.message
