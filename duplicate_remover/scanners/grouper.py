"""Duplicate grouping over fingerprinted records."""

from typing import Iterable

from ..models.common import FileRecord
from ..models.scan import ScanResult
from .categorizer import group_by_category


def _index_by_hash(records: Iterable[FileRecord]) -> dict[str, list[FileRecord]]:
    by_hash: dict[str, list[FileRecord]] = {}
    for record in records:
        by_hash.setdefault(record.hash, []).append(record)
    for members in by_hash.values():
        for index, record in enumerate(members):
            flagged = index > 0
            if record.duplicate != flagged:
                record.duplicate = flagged
    return by_hash


def group_duplicates(records: Iterable[FileRecord]) -> dict[str, list[FileRecord]]:
    """Group records by hash, keeping only groups of two or more.

    Records are taken in discovery order; the first member of each group is
    the canonical copy and keeps ``duplicate=False``, every later member is
    flagged. Records whose hash is unique are reset to ``duplicate=False`` so
    the function can be re-run after records are added or removed.
    """
    by_hash = _index_by_hash(records)
    return {digest: members for digest, members in by_hash.items() if len(members) > 1}


class GroupIndex:
    """Hash index of one scan, kept in step with its ``ScanResult``.

    ``extend`` touches only the new records, so the pipeline can append batch
    after batch without regrouping the whole scan. ``rebuild`` recomputes
    everything and is used after records are removed. Both must run without
    yielding to the event loop so readers never see a half-updated result.
    """

    def __init__(self):
        self._by_hash: dict[str, list[FileRecord]] = {}

    def rebuild(self, result: ScanResult) -> None:
        self._by_hash = _index_by_hash(result.files)
        # groups share their member lists with the index so extend() keeps them current
        result.duplicate_groups = {
            digest: members for digest, members in self._by_hash.items() if len(members) > 1
        }
        result.categorized_files = group_by_category(result.files)

    def extend(self, result: ScanResult, records: Iterable[FileRecord]) -> None:
        for record in records:
            result.files.append(record)
            members = self._by_hash.setdefault(record.hash, [])
            members.append(record)
            if len(members) > 1:
                record.duplicate = True
                if len(members) == 2:
                    result.duplicate_groups[record.hash] = members
            elif record.duplicate:
                record.duplicate = False
            result.categorized_files.setdefault(record.category.value, []).append(record)
