"""FastAPI application."""

import asyncio

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware

from loop.config import Settings
from loop.interface.api.routes import (
    admin,
    auth,
    circles,
    comments,
    health,
    interactions,
    loops,
    moderation,
    notifications,
    search,
    streams,
    upload,
    users,
)
from loop.interface.error import (
    discard_request_writes,
    error_response,
    register_error_handlers,
)
from loop.util.di.container import create_container, setup_di
from loop.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use (tests pass one built from mocks)
    """
    settings = Settings()

    # Instrument httpx for outbound HTTP requests (Cloudinary, Realtime)
    instrument_httpx()

    app_instance = FastAPI(
        title="Loop API",
        description="Backend API for Loop - branching posts, feeds and notifications",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    timeout = settings.api.request_timeout_seconds

    @app_instance.middleware("http")
    async def enforce_timeout(request: Request, call_next):
        try:
            return await asyncio.wait_for(call_next(request), timeout=timeout)
        except asyncio.TimeoutError:
            logfire.error(
                "Request timed out",
                path=request.url.path,
                method=request.method,
                timeout=timeout,
            )
            # The handler was cancelled mid-flight, its writes must not commit
            await discard_request_writes(request)
            return error_response(
                status.HTTP_503_SERVICE_UNAVAILABLE, "Service unavailable"
            )

    # Added last so CORS headers are present on every response, timeouts included
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.frontend_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    register_error_handlers(app_instance)

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    # Loops before interactions/comments: /loops/feed must win over /loops/{id}
    app_instance.include_router(loops.router)
    app_instance.include_router(interactions.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(notifications.router)
    app_instance.include_router(users.router)
    app_instance.include_router(circles.router)
    app_instance.include_router(streams.router)
    app_instance.include_router(upload.router)
    app_instance.include_router(admin.router)
    app_instance.include_router(moderation.router)
    app_instance.include_router(search.router)

    return app_instance
