from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, settings as default_settings
from .routers import banks
from .state import BankDirectory, load_directory

logging.basicConfig(level=default_settings.log_level)
logger = logging.getLogger("bankbridge.backend")


def create_app(directory: Optional[BankDirectory] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the API; without a prebuilt directory the datasets are loaded on startup."""
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.directory is None:
            logger.info("Bootstrapping BankBridge backend")
            app.state.directory = load_directory(settings)
        yield

    app = FastAPI(title=settings.title, version=settings.version, lifespan=lifespan)
    app.state.directory = directory

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(banks.router)
    return app


app = create_app()
