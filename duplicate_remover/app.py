"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, settings as default_settings
from .api.router import api_router
from .services.deletion_manager import DeletionManager
from .services.recent_directories import RecentDirectories
from .services.scan_manager import ScanManager

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(name)s: %(message)s")


def build_scan_manager(settings: Settings) -> ScanManager:
    return ScanManager(
        recent_directories=RecentDirectories(limit=settings.recent_directories_limit),
        hash_workers=settings.hash_workers,
        chunk_size=settings.hash_chunk_size,
        walk_batch_size=settings.walk_batch_size,
        progress_notify_interval=settings.progress_notify_interval,
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    if settings.debug:
        logging.getLogger("duplicate_remover").setLevel(logging.DEBUG)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        scan_manager = build_scan_manager(settings)
        app.state.scan_manager = scan_manager
        app.state.deletion_manager = DeletionManager(scan_manager)
        yield
        await scan_manager.shutdown()

    app = FastAPI(
        title="duplicate-remover",
        version="0.1.0",
        description="Find and remove duplicate files",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(api_router, prefix="/api")

    return app
