"""Scan job lifecycle and async orchestration."""

import asyncio
import logging
import time
from typing import Callable, Iterator, Optional, Union

from ..errors import InputError, ScanConflictError, ScanNotFoundError, TransientFileError
from ..models.common import FileRecord, ScanWarning
from ..models.scan import ScanResult, ScanStats, ScanStatus, CategoryStats
from ..scanners.grouper import GroupIndex
from ..scanners.hasher import DEFAULT_CHUNK_SIZE, build_file_record
from ..scanners.walker import Walker
from ..utils.permissions import resolve_scan_root
from .recent_directories import RecentDirectories

logger = logging.getLogger(__name__)


class ScanJob:
    """One scan's result plus the lock that serializes every write to it."""

    def __init__(self, result: ScanResult):
        self.result = result
        self.lock = asyncio.Lock()
        self.task: Optional[asyncio.Task] = None
        self.deleted_paths: set[str] = set()
        self.index = GroupIndex()

    @property
    def scan_id(self) -> str:
        return self.result.scan_id

    def snapshot(self) -> ScanResult:
        return self.result.model_copy(deep=True)


def _take(paths: Iterator[str], count: int) -> list[str]:
    batch = []
    for path in paths:
        batch.append(path)
        if len(batch) >= count:
            break
    return batch


class ScanManager:
    """Registry of scan jobs keyed by scan id.

    All mutation of a job's ``ScanResult`` happens on the event loop while
    holding ``job.lock`` and without awaiting in between, so a snapshot taken
    under the same lock is always internally consistent.
    """

    def __init__(
        self,
        recent_directories: Optional[RecentDirectories] = None,
        hash_workers: int = 4,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        walk_batch_size: int = 64,
        progress_notify_interval: float = 1.0,
        resolve_root: Callable[[str], str] = resolve_scan_root,
    ):
        self._jobs: dict[str, ScanJob] = {}
        self._progress_listeners: dict[str, list[Callable]] = {}
        self.recent_directories = recent_directories or RecentDirectories()
        self.hash_workers = max(1, hash_workers)
        self.chunk_size = chunk_size
        self.walk_batch_size = max(1, walk_batch_size)
        self.progress_notify_interval = progress_notify_interval
        self._resolve_root = resolve_root

    async def start_scan(self, directory: str) -> str:
        """Register a PENDING scan and run it in the background.

        Raises InputError for an invalid root (no job is created) and
        ScanConflictError when the same directory is already being scanned.
        """
        root = self._resolve_root(directory)

        for job in self._jobs.values():
            if job.result.directory == root and not job.result.status.is_terminal:
                raise ScanConflictError(root, job.scan_id)

        self.recent_directories.add(root)
        job = ScanJob(ScanResult(directory=root))
        self._jobs[job.scan_id] = job
        job.task = asyncio.create_task(self._run_scan(job))
        logger.info(f"Scan {job.scan_id} queued for {root}")
        return job.scan_id

    def get_job(self, scan_id: str) -> ScanJob:
        job = self._jobs.get(scan_id)
        if job is None:
            raise ScanNotFoundError(scan_id)
        return job

    async def get_result(self, scan_id: str) -> ScanResult:
        job = self.get_job(scan_id)
        async with job.lock:
            return job.snapshot()

    async def list_results(self) -> list[ScanResult]:
        results = []
        for job in list(self._jobs.values()):
            async with job.lock:
                results.append(job.snapshot())
        return results

    async def get_stats(self, scan_id: str) -> ScanStats:
        result = await self.get_result(scan_id)
        by_category: dict[str, CategoryStats] = {}
        for category, records in result.categorized_files.items():
            by_category[category] = CategoryStats(
                count=len(records),
                size=sum(r.size for r in records),
            )
        return ScanStats(
            scan_id=result.scan_id,
            status=result.status,
            total_files=result.total_files,
            total_size=sum(f.size for f in result.files),
            duplicate_groups=len(result.duplicate_groups),
            duplicate_count=result.duplicate_count,
            reclaimable_size=sum(f.size for f in result.files if f.duplicate),
            by_category=by_category,
        )

    async def wait_for(self, scan_id: str) -> ScanResult:
        """Wait until the scan reaches a terminal state and return it."""
        job = self.get_job(scan_id)
        if job.task is not None:
            await asyncio.shield(job.task)
        return await self.get_result(scan_id)

    def add_progress_listener(self, scan_id: str, callback: Callable) -> None:
        self._progress_listeners.setdefault(scan_id, []).append(callback)

    def remove_progress_listener(self, scan_id: str, callback: Callable) -> None:
        listeners = self._progress_listeners.get(scan_id, [])
        if callback in listeners:
            listeners.remove(callback)

    async def shutdown(self) -> None:
        tasks = [job.task for job in self._jobs.values() if job.task and not job.task.done()]
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        # tasks cancelled before their first step never reach _run_scan's handlers
        for job in list(self._jobs.values()):
            if not job.result.status.is_terminal:
                await self._fail(job, "Scan cancelled", keep_partial=True)

    async def _run_scan(self, job: ScanJob) -> None:
        result = job.result
        pending_warnings: list[ScanWarning] = []
        walker = Walker(result.directory, on_warning=pending_warnings.append)
        workers = asyncio.Semaphore(self.hash_workers)
        last_notify_time = 0.0

        try:
            async with job.lock:
                result.transition(ScanStatus.RUNNING)
            await self.notify_progress(job)
            logger.info(f"Scan {job.scan_id} started: {result.directory}")

            paths = await asyncio.to_thread(walker.walk)
            while True:
                # the walker thread only touches pending_warnings while _take runs
                batch = await asyncio.to_thread(_take, paths, self.walk_batch_size)
                outcomes = await asyncio.gather(
                    *(self._hash_one(path, workers) for path in batch),
                    return_exceptions=True,
                )
                # every sibling has finished; surface the first failure only now
                for outcome in outcomes:
                    if isinstance(outcome, BaseException):
                        raise outcome

                async with job.lock:
                    result.warnings.extend(pending_warnings)
                    pending_warnings.clear()
                    result.warnings.extend(o for o in outcomes if isinstance(o, ScanWarning))
                    job.index.extend(result, (o for o in outcomes if isinstance(o, FileRecord)))

                if not batch:
                    break

                now = time.monotonic()
                if now - last_notify_time >= self.progress_notify_interval:
                    last_notify_time = now
                    await self.notify_progress(job)

            async with job.lock:
                result.transition(ScanStatus.COMPLETED)
            logger.info(
                f"Scan {job.scan_id} completed: {result.total_files} files, "
                f"{len(result.duplicate_groups)} duplicate groups, "
                f"{len(result.warnings)} warnings"
            )

        except InputError as e:
            logger.warning(f"Scan {job.scan_id} failed: {e}")
            await self._fail(job, str(e), keep_partial=False)
        except asyncio.CancelledError:
            logger.info(f"Scan {job.scan_id} cancelled")
            await self._fail(job, "Scan cancelled", keep_partial=True)
        except Exception as e:
            logger.exception(f"Scan {job.scan_id} failed")
            await self._fail(job, str(e), keep_partial=True)

        await self.notify_progress(job)

    async def _hash_one(
        self, path: str, workers: asyncio.Semaphore,
    ) -> Union[FileRecord, ScanWarning]:
        async with workers:
            try:
                return await asyncio.to_thread(build_file_record, path, self.chunk_size)
            except TransientFileError as e:
                logger.debug(f"Skipping {path}: {e.message}")
                return ScanWarning(path=path, stage="hash", message=e.message)

    async def _fail(self, job: ScanJob, error: str, keep_partial: bool) -> None:
        async with job.lock:
            result = job.result
            if result.status.is_terminal:
                return
            if not keep_partial:
                result.files = []
                job.index.rebuild(result)
            result.error = error
            result.transition(ScanStatus.FAILED)

    async def notify_progress(self, job: ScanJob) -> None:
        listeners = self._progress_listeners.get(job.scan_id, [])
        if not listeners:
            return
        async with job.lock:
            snapshot = job.snapshot()
        for cb in list(listeners):
            try:
                await cb(snapshot)
            except Exception:
                logger.debug(f"Progress listener for scan {job.scan_id} failed", exc_info=True)
