"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from worldnews.config import VERSION, Settings
from worldnews.interface.api.routes import (
    admin,
    auth,
    health,
    posts,
    reference,
    theme,
    users,
)
from worldnews.util.di.container import create_container, setup_di
from worldnews.util.observability import instrument_fastapi


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; start_app.py
    does so in production.

    Args:
        settings: Settings to use (loaded from the environment when None)
        container: DI container to use (production container when None)
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="World News API",
        description="Backend API for World News - country and category tagged news sharing",
        version=VERSION,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
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
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(users.router)
    app_instance.include_router(admin.router)
    app_instance.include_router(theme.router)
    app_instance.include_router(reference.router)

    # Uploaded images; the directory may not exist until the first upload
    app_instance.mount(
        settings.storage.public_path,
        StaticFiles(directory=settings.storage.root, check_dir=False),
        name="media",
    )

    return app_instance
