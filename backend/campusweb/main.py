"""
Campus Web — FastAPI Application Factory
==========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn campusweb.main:app).
When:  Once at server startup; the returned app handles all subsequent requests.

Application Architecture:
    ┌────────────────────────────────────────────────────────┐
    │                      FastAPI App                       │
    │                                                        │
    │  Middleware Chain (outermost first):                   │
    │  ┌──────────┐ ┌──────────┐ ┌─────────────────────────┐ │
    │  │ Logging  │→│ Session  │→│ Response Locals         │ │
    │  └──────────┘ └──────────┘ └─────────────────────────┘ │
    │                                                        │
    │  Routers (section stylesheet via router dependency):   │
    │  /  /about  /catalog*  /departments  /faculty*         │
    │  /register*  /login*  /logout  /dashboard  /health     │
    │                                                        │
    │  Exception Handlers → HTML error pages:                │
    │  404 → errors/404.html   other → errors/500.html       │
    │  AuthenticationRequiredError → redirect /login         │
    └────────────────────────────────────────────────────────┘
"""

import logging
import sys
import traceback
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from campusweb import __version__
from campusweb.config import settings
from campusweb.database import dispose_engine
from campusweb.exceptions import AuthenticationRequiredError, CampusError
from campusweb.flash import flash
from campusweb.middleware.locals import ResponseLocalsMiddleware
from campusweb.middleware.logging import RequestLoggingMiddleware
from campusweb.presentation.context import LocalsComposer, get_response_context
from campusweb.routes import auth, catalog, faculty, health, pages, registration
from campusweb.templating import render_page

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before any other initialization.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging, validate settings, log the environment.
    Shutdown: dispose the database engine.
    """
    setup_logging()
    logger.info("=" * 60)
    logger.info("Campus Web %s starting up (environment: %s)", __version__, settings.node_env)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Keep serving; pages still render, the operator sees this in the log
        logger.error("Configuration error: %s", str(e))

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("Campus Web shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Error Pages
# ══════════════════════════════════════════════════════════════════════════

def render_error_page(
    request: Request,
    status_code: int,
    message: str,
    exc: Optional[BaseException] = None,
) -> Response:
    """
    Render errors/404.html for 404 and errors/500.html for everything else.

    Production shows a generic message and no stack; other environments show
    the real message and traceback.
    """
    is_production = get_response_context(request).environment == "production"
    is_not_found = status_code == 404
    stack = None
    if exc is not None and not is_production:
        stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))

    try:
        return render_page(
            request,
            "errors/404.html" if is_not_found else "errors/500.html",
            status_code=status_code,
            title="Page Not Found" if is_not_found else "Server Error",
            error="An error occurred" if is_production else message,
            stack=stack,
            status=status_code,
        )
    except Exception:
        logger.exception("Failed to render error page for status %d", status_code)
        return HTMLResponse(
            f"<h1>Error {status_code}</h1><p>An error occurred.</p>",
            status_code=status_code,
        )


def _log_error(request: Request, status_code: int, message: str, exc_info: bool = False) -> None:
    level = logging.ERROR if status_code >= 500 else logging.WARNING
    logger.log(
        level,
        "Error %d on %s %s: %s (user agent: %s)",
        status_code,
        request.method,
        request.url.path,
        message,
        request.headers.get("user-agent", "-"),
        exc_info=exc_info,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers.

    Handler hierarchy:
        AuthenticationRequiredError → 303 redirect to /login with a flash
        CampusError (and subclasses) → error page with exc.status_code
        StarletteHTTPException       → error page (unmatched routes → 404)
        Exception (fallback)         → 500 error page, traceback logged
    """

    @app.exception_handler(AuthenticationRequiredError)
    async def handle_login_required(request: Request, exc: AuthenticationRequiredError):
        flash(request, "error", exc.message)
        return RedirectResponse(url="/login", status_code=303)

    @app.exception_handler(CampusError)
    async def handle_campus_error(request: Request, exc: CampusError):
        _log_error(request, exc.status_code, exc.message)
        if exc.context:
            logger.debug("Error context: %s", exc.context)
        return render_error_page(request, exc.status_code, exc.message, exc)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        message = "Page Not Found" if exc.status_code == 404 else str(exc.detail)
        _log_error(request, exc.status_code, message)
        return render_error_page(request, exc.status_code, message, exc)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        _log_error(request, 500, str(exc), exc_info=True)
        return render_error_page(request, 500, str(exc), exc)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(composer: Optional[LocalsComposer] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        composer: LocalsComposer used for every request. Tests pass one with a
                  pinned clock and theme picker; the default reads NODE_ENV
                  from settings.
    """
    composer = composer or LocalsComposer(environment=settings.node_env)

    app = FastAPI(
        title="Campus Web",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )
    app.state.locals_composer = composer

    # ── Register Middleware ───────────────────────────────────────────────
    # Starlette runs middleware in REVERSE order of addition: the locals
    # middleware is added first so it runs innermost, after the session
    # cookie has been decoded.
    app.add_middleware(ResponseLocalsMiddleware, composer=composer)
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret,
        session_cookie=settings.session_cookie,
        max_age=settings.session_max_age,
        same_site="lax",
        https_only=settings.is_production,
    )
    app.add_middleware(RequestLoggingMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Static Assets ─────────────────────────────────────────────────────
    app.mount("/css", StaticFiles(directory=STATIC_DIR / "css"), name="css")
    app.mount("/js", StaticFiles(directory=STATIC_DIR / "js"), name="js")

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(pages.router)
    app.include_router(catalog.router)
    app.include_router(catalog.departments_router)
    app.include_router(faculty.router)
    app.include_router(registration.router)
    app.include_router(auth.router)
    app.include_router(auth.account_router)
    app.include_router(health.router)

    return app


app = create_app()
