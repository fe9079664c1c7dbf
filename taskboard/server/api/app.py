"""FastAPI application factory for Taskboard Server."""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..config.logging import get_logger
from ..config.settings import Settings, get_settings
from ..services.task_store import TaskStore
from .routers import health, todos

logger = get_logger(__name__)

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"


def create_app(
    settings: Optional[Settings] = None,
    task_store: Optional[TaskStore] = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Each application owns exactly one task store; a fresh, empty one is
    built unless the caller supplies its own.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        logger.info(
            f"Taskboard Server starting up on {settings.API_HOST}:{settings.API_PORT}..."
        )
        yield
        # Shutdown
        logger.info(
            f"Taskboard Server shutting down, discarding {len(app.state.task_store)} tasks"
        )

    app = FastAPI(
        title="Taskboard Server API",
        description="A minimal task-tracking service",
        version=settings.APP_VERSION,
        lifespan=lifespan,
        docs_url="/docs" if settings.API_DEBUG else None,
        redoc_url="/redoc" if settings.API_DEBUG else None,
    )
    app.state.task_store = task_store if task_store is not None else TaskStore()

    _add_middleware(app, settings)
    _add_exception_handlers(app)
    _add_routes(app)

    return app


def _add_middleware(app: FastAPI, settings: Settings) -> None:
    """Add middleware to the application."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _add_exception_handlers(app: FastAPI) -> None:
    """Give framework errors the same `{message}` body as store failures."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _add_routes(app: FastAPI) -> None:
    """Add routes to the application."""
    app.include_router(health.router, prefix="/health", tags=["health"])
    app.include_router(todos.router, prefix="/todos", tags=["todos"])

    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    @app.get("/", include_in_schema=False)
    async def index():
        return FileResponse(STATIC_DIR / "index.html")
