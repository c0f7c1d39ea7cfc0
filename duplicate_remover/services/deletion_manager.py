"""Deletion of reported duplicates."""

import asyncio
import logging
import os

from ..errors import DeletionValidationError
from ..models.deletion import DeleteResult, PathFailure
from .scan_manager import ScanJob, ScanManager

logger = logging.getLogger(__name__)


def _normalize(path: str) -> str:
    return os.path.normpath(os.path.abspath(os.path.expanduser(path.strip())))


def _unlink(path: str) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        # already gone, e.g. removed by a concurrent request
        pass


class DeletionManager:
    def __init__(self, scan_manager: ScanManager):
        self.scan_manager = scan_manager

    async def delete_duplicates(self, scan_id: str, file_paths: list[str]) -> DeleteResult:
        """Delete files this scan flagged as duplicates.

        Raises ScanNotFoundError for an unknown scan. Every other problem is
        reported per path in ``DeleteResult.failures``.
        """
        job = self.scan_manager.get_job(scan_id)
        outcome = DeleteResult()

        async with job.lock:
            verified = self._verify(job, file_paths, outcome)

            deleted: set[str] = set()
            for path in verified:
                try:
                    await asyncio.to_thread(_unlink, path)
                except OSError as e:
                    logger.warning(f"Could not delete {path}: {e}")
                    outcome.failures.append(PathFailure(path=path, reason=e.strerror or str(e)))
                    continue
                deleted.add(path)

            if deleted:
                result = job.result
                result.files = [f for f in result.files if f.file_path not in deleted]
                job.index.rebuild(result)
                job.deleted_paths.update(deleted)

        outcome.deleted_count = len(deleted)
        logger.info(
            f"Scan {scan_id}: deleted {outcome.deleted_count} files, "
            f"{len(outcome.failures)} failures"
        )
        if deleted:
            await self.scan_manager.notify_progress(job)
        return outcome

    def _verify(self, job: ScanJob, file_paths: list[str], outcome: DeleteResult) -> list[str]:
        """Select the requested paths that are recorded duplicates of this scan.

        Checked against the state before anything in the batch is deleted,
        so the canonical copy of a group can never be selected.
        """
        records = {f.file_path: f for f in job.result.files}
        verified: list[str] = []
        seen: set[str] = set()

        for raw in file_paths:
            path = _normalize(raw)
            if path in seen:
                continue
            seen.add(path)

            try:
                if path in job.deleted_paths:
                    continue
                record = records.get(path)
                if record is None:
                    raise DeletionValidationError(raw, "File is not part of this scan")
                if not record.duplicate:
                    raise DeletionValidationError(raw, "File is not flagged as a duplicate")
            except DeletionValidationError as e:
                outcome.failures.append(PathFailure(path=e.path, reason=e.reason))
                continue
            verified.append(path)
        return verified
