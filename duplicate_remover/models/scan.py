"""Scan-related models."""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
import uuid

from pydantic import Field, computed_field, field_validator

from ..errors import InvalidTransitionError
from .common import CamelModel, FileRecord, ScanWarning


class ScanStatus(str, Enum):
    PENDING = "PENDING"
    RUNNING = "RUNNING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"

    @property
    def is_terminal(self) -> bool:
        return self in (ScanStatus.COMPLETED, ScanStatus.FAILED)


_ALLOWED_TRANSITIONS = {
    ScanStatus.PENDING: {ScanStatus.RUNNING, ScanStatus.FAILED},
    ScanStatus.RUNNING: {ScanStatus.COMPLETED, ScanStatus.FAILED},
    ScanStatus.COMPLETED: set(),
    ScanStatus.FAILED: set(),
}


class ScanRequest(CamelModel):
    directory: str

    @field_validator("directory")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Directory path is required")
        return value


class ScanStartResponse(CamelModel):
    scan_id: str
    status: ScanStatus


class ScanResult(CamelModel):
    scan_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    directory: str
    scan_time: datetime = Field(default_factory=lambda: datetime.now(tz=timezone.utc))
    completed_at: Optional[datetime] = None
    status: ScanStatus = ScanStatus.PENDING
    files: list[FileRecord] = Field(default_factory=list)
    duplicate_groups: dict[str, list[FileRecord]] = Field(default_factory=dict)
    categorized_files: dict[str, list[FileRecord]] = Field(default_factory=dict)
    warnings: list[ScanWarning] = Field(default_factory=list)
    error: Optional[str] = None

    @computed_field(alias="totalFiles")
    @property
    def total_files(self) -> int:
        return len(self.files)

    @computed_field(alias="duplicateCount")
    @property
    def duplicate_count(self) -> int:
        """Files removable while keeping one canonical copy per group."""
        return sum(len(group) - 1 for group in self.duplicate_groups.values())

    def transition(self, status: ScanStatus) -> None:
        if status not in _ALLOWED_TRANSITIONS[self.status]:
            raise InvalidTransitionError(
                f"Scan {self.scan_id}: cannot move from {self.status.value} to {status.value}"
            )
        self.status = status
        if status.is_terminal:
            self.completed_at = datetime.now(tz=timezone.utc)


class CategoryStats(CamelModel):
    count: int = 0
    size: int = 0


class ScanStats(CamelModel):
    scan_id: str
    status: ScanStatus
    total_files: int = 0
    total_size: int = 0
    duplicate_groups: int = 0
    duplicate_count: int = 0
    reclaimable_size: int = 0
    by_category: dict[str, CategoryStats] = Field(default_factory=dict)
