"""Data models."""

from .common import FileCategory, FileRecord, ScanWarning
from .scan import ScanRequest, ScanResult, ScanStartResponse, ScanStats, ScanStatus
from .deletion import DeleteRequest, DeleteResult, PathFailure
from .system import DirectoryValidation, DirectoryValidationRequest, RecentDirectories

__all__ = [
    "FileCategory",
    "FileRecord",
    "ScanWarning",
    "ScanRequest",
    "ScanResult",
    "ScanStartResponse",
    "ScanStats",
    "ScanStatus",
    "DeleteRequest",
    "DeleteResult",
    "PathFailure",
    "DirectoryValidation",
    "DirectoryValidationRequest",
    "RecentDirectories",
]
