"""Directory helper models."""

from pydantic import Field

from .common import CamelModel


class DirectoryValidationRequest(CamelModel):
    directory: str = ""


class DirectoryValidation(CamelModel):
    valid: bool
    message: str


class RecentDirectories(CamelModel):
    directories: list[str] = Field(default_factory=list)
