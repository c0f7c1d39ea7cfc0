"""Duplicate deletion models."""

from pydantic import Field

from .common import CamelModel


class DeleteRequest(CamelModel):
    file_paths: list[str] = Field(min_length=1)


class PathFailure(CamelModel):
    path: str
    reason: str


class DeleteResult(CamelModel):
    deleted_count: int = 0
    failures: list[PathFailure] = Field(default_factory=list)
