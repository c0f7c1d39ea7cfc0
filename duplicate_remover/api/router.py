"""Aggregate all API sub-routers."""

from fastapi import APIRouter

from . import scan, duplicates, system, ws

api_router = APIRouter()

api_router.include_router(scan.router)
api_router.include_router(duplicates.router)
api_router.include_router(system.router)
api_router.include_router(ws.router)
