"""Core shared models."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes with camelCase keys, accepts either spelling on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FileCategory(str, Enum):
    IMAGE = "image"
    DOCUMENT = "document"
    VIDEO = "video"
    AUDIO = "audio"
    ARCHIVE = "archive"
    CODE = "code"
    OTHER = "other"


class FileRecord(CamelModel):
    file_path: str
    file_name: str
    hash: str
    size: int = 0
    extension: str = ""
    category: FileCategory = FileCategory.OTHER
    last_modified: datetime
    duplicate: bool = False  # set by the grouping stage only


class ScanWarning(CamelModel):
    path: str
    stage: str  # "walk" or "hash"
    message: str
