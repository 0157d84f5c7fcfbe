"""FastAPI application for the LumoChat relay."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from lumochat import __version__
from lumochat.application.ports.llm_port import LLMPort
from lumochat.config import RelayConfig
from lumochat.domain.exceptions import InvalidInputError, NotFoundError, ProviderFailureError
from lumochat.infrastructure.llm.openai_adapter import OpenAIAdapter
from lumochat.server.dependencies import AppState, get_state
from lumochat.server.models import HealthResponse
from lumochat.server.routes import chat, conversations, messages
from lumochat.storage.memory_store import MemoryStore

logger = logging.getLogger(__name__)

PROVIDER_FAILURE_MESSAGE = (
    "Failed to process chat message. Please check your provider token and try again."
)

# Status code -> error envelope code
_CODE_MAP = {
    400: "VALIDATION_ERROR",
    404: "NOT_FOUND",
    500: "INTERNAL_ERROR",
}


def _error(status_code: int, message: str, code: str | None = None, details: dict | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code or _CODE_MAP.get(status_code, "ERROR"),
                "message": message,
                "details": details or {},
            }
        },
    )


def build_llm_adapter(config: RelayConfig) -> OpenAIAdapter:
    """Create the provider adapter; a missing API key is fatal."""
    provider = config.provider
    return OpenAIAdapter(
        api_key=provider.resolve_api_key(),
        base_url=provider.base_url,
        timeout=provider.timeout_seconds,
        max_retries=provider.max_retries,
    )


def create_app(
    config: RelayConfig | None = None,
    llm: LLMPort | None = None,
    store: MemoryStore | None = None,
    load_env: bool = True,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Relay configuration; loaded from the default search paths if omitted.
        llm: Completion adapter; an :class:`OpenAIAdapter` is built from
            ``config.provider`` if omitted.
        store: Store instance; a fresh :class:`MemoryStore` if omitted.
        load_env: Load a ``.env`` file from the working directory first.

    Raises:
        ConfigurationError: If no adapter is given and the API key is missing.
    """
    if load_env:
        _env_path = Path(".env")
        _loaded = load_dotenv(_env_path)
        logger.debug("load_dotenv(%s) returned %s", _env_path.resolve(), _loaded)

    config = config or RelayConfig.load()

    logging.basicConfig(
        level=config.server.log_level,
        format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    logging.getLogger("lumochat").setLevel(config.server.log_level)

    if llm is None:
        llm = build_llm_adapter(config)

    app = FastAPI(
        title="LumoChat API",
        version=__version__,
        description="Chat relay with persona prompts and in-memory history",
    )
    app.state.lumochat = AppState(config=config, llm=llm, store=store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return _error(400, "Invalid request format", details={"errors": _jsonable_errors(exc.errors())})

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError):
        return _error(400, str(exc), details={"errors": _jsonable_errors(exc.errors)})

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return _error(404, str(exc))

    @app.exception_handler(ProviderFailureError)
    async def provider_failure_handler(request: Request, exc: ProviderFailureError):
        # Cause is already logged by the use case; keep it out of the response.
        return _error(500, PROVIDER_FAILURE_MESSAGE, code="PROVIDER_ERROR")

    app.include_router(conversations.router)
    app.include_router(messages.router)
    app.include_router(chat.router)

    @app.get("/health")
    async def health_check(request: Request) -> HealthResponse:
        state = get_state(request)
        return HealthResponse(
            status="ok",
            version=__version__,
            uptime_seconds=round(time.time() - state.start_time, 1),
            **state.store.stats(),
        )

    return app


def _jsonable_errors(errors) -> list:
    """Keep only the JSON-safe parts of pydantic error entries."""
    return [
        {"loc": list(e.get("loc", ())), "msg": e.get("msg", ""), "type": e.get("type", "")}
        for e in errors
    ]
