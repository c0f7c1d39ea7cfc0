"""Request-scoped access to the process-wide services on ``app.state``."""

from fastapi import Request

from ..services.deletion_manager import DeletionManager
from ..services.recent_directories import RecentDirectories
from ..services.scan_manager import ScanManager


def get_scan_manager(request: Request) -> ScanManager:
    return request.app.state.scan_manager


def get_deletion_manager(request: Request) -> DeletionManager:
    return request.app.state.deletion_manager


def get_recent_directories(request: Request) -> RecentDirectories:
    return request.app.state.scan_manager.recent_directories
