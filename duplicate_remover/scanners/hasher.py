"""Streaming content fingerprints."""

import errno
import hashlib
import os
from datetime import datetime, timezone

from ..errors import FatalStorageError, TransientFileError
from ..models.common import FileRecord
from .categorizer import categorize

DEFAULT_CHUNK_SIZE = 64 * 1024

# errnos meaning the device or mount is gone rather than one entry
STORAGE_ERRNOS = frozenset({
    errno.EIO,
    errno.ENODEV,
    errno.ENXIO,
    errno.ESTALE,
    errno.ENOTCONN,
    errno.ESHUTDOWN,
})


def is_storage_failure(exc: OSError) -> bool:
    return exc.errno in STORAGE_ERRNOS


def hash_file(path: str, chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
    """SHA-256 hex digest of the file, read chunk by chunk."""
    h = hashlib.sha256()
    try:
        with open(path, "rb") as f:
            while True:
                chunk = f.read(chunk_size)
                if not chunk:
                    break
                h.update(chunk)
    except OSError as e:
        if is_storage_failure(e):
            raise FatalStorageError(f"Storage unavailable while reading {path}: {e}") from e
        raise TransientFileError(path, e.strerror or str(e)) from e
    return h.hexdigest()


def build_file_record(path: str, chunk_size: int = DEFAULT_CHUNK_SIZE) -> FileRecord:
    """Stat, hash and categorize one file.

    Runs on a worker thread; the caller owns appending the record to a scan.
    """
    try:
        stat = os.stat(path, follow_symlinks=False)
    except OSError as e:
        if is_storage_failure(e):
            raise FatalStorageError(f"Storage unavailable while reading {path}: {e}") from e
        raise TransientFileError(path, e.strerror or str(e)) from e

    digest = hash_file(path, chunk_size)
    name = os.path.basename(path)
    _, ext = os.path.splitext(name)
    ext = ext.lower()

    return FileRecord(
        file_path=path,
        file_name=name,
        hash=digest,
        size=stat.st_size,
        extension=ext,
        category=categorize(ext),
        last_modified=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
    )
