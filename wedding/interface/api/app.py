"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wedding.config import Settings
from wedding.interface.api.routes import comments, gifts, health, invitations, public
from wedding.util.di.container import create_container, setup_di
from wedding.util.observability import instrument_fastapi, instrument_httpx


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()

    instrument_httpx()

    app_instance = FastAPI(
        title="Wedding Invitations API",
        description="Backend API for digital wedding invitations, guest wishes and gifts",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            settings.sharing.public_base_url,
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    container = create_container()
    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(invitations.router)
    app_instance.include_router(public.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(gifts.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
