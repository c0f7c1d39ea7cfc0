"""Walk, hash, categorize and group stages."""

from .categorizer import categorize, group_by_category
from .grouper import GroupIndex, group_duplicates
from .hasher import build_file_record, hash_file
from .walker import Walker

__all__ = [
    "categorize",
    "group_by_category",
    "group_duplicates",
    "GroupIndex",
    "build_file_record",
    "hash_file",
    "Walker",
]
