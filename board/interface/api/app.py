"""FastAPI application factory for the comment board."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from board.config import Settings
from board.interface.api.routes import captcha, comments, files, health, hub
from board.util.di.container import create_container, setup_di
from board.util.observability import SERVICE_VERSION, instrument_fastapi

# Dev servers of the bundled frontends
LOCAL_ORIGINS = ["http://localhost:3000", "http://localhost:5173"]


@asynccontextmanager
async def lifespan(app_instance: FastAPI):
    """Close the DI container (engine, Redis pool) on shutdown."""
    yield
    await app_instance.state.dishka_container.close()


def _add_cors(app_instance: FastAPI, settings: Settings) -> None:
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.api.frontend_url, *LOCAL_ORIGINS],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )


def create_app() -> FastAPI:
    """Build the API with the production container.

    Logfire must already be configured; ``scripts/start_app.py`` does that.
    Tests call :func:`setup_di` again afterwards to swap in their container.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Comment Board API",
        description="Threaded comments with attachments, CAPTCHA and live updates",
        version=SERVICE_VERSION,
        lifespan=lifespan,
    )
    instrument_fastapi(app_instance)
    _add_cors(app_instance, settings)
    setup_di(app_instance, create_container())

    for module in (health, comments, captcha, files, hub):
        app_instance.include_router(module.router)

    # Directory is created on first upload
    app_instance.mount(
        settings.uploads.url_prefix,
        StaticFiles(directory=settings.uploads.directory, check_dir=False),
        name="uploads",
    )

    return app_instance


app = create_app()
