"""Depth-first directory walker."""

import logging
import os
from typing import Callable, Iterator, Optional

from ..errors import FatalStorageError, InputError
from ..models.common import ScanWarning
from .hasher import is_storage_failure

logger = logging.getLogger(__name__)


class Walker:
    """Yields absolute paths of regular files under ``root``.

    Symlinks are never followed. Entries that cannot be read are skipped and
    passed to ``on_warning``; only an unreadable root or a storage-level
    failure stops the walk.
    """

    def __init__(
        self,
        root: str,
        on_warning: Optional[Callable[[ScanWarning], None]] = None,
    ):
        self.root = os.path.abspath(root)
        self.on_warning = on_warning

    def walk(self) -> Iterator[str]:
        """Return a fresh generator over the tree."""
        try:
            entries = self._list_dir(self.root)
        except OSError as e:
            raise InputError(f"Cannot read directory {self.root}: {e.strerror or e}") from e
        return self._walk_entries(entries)

    def _walk_entries(self, entries: list[os.DirEntry]) -> Iterator[str]:
        # one iterator per open directory level; depth is bounded by the tree, not the call stack
        stack: list[Iterator[os.DirEntry]] = [iter(entries)]
        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue
            try:
                if entry.is_symlink():
                    continue
                if entry.is_dir(follow_symlinks=False):
                    children = self._list_dir(entry.path)
                    stack.append(iter(children))
                elif entry.is_file(follow_symlinks=False):
                    yield entry.path
            except OSError as e:
                self._skip(entry.path, e)

    @staticmethod
    def _list_dir(path: str) -> list[os.DirEntry]:
        with os.scandir(path) as it:
            return sorted(it, key=lambda e: e.name)

    def _skip(self, path: str, exc: OSError) -> None:
        if is_storage_failure(exc) or not os.path.isdir(self.root):
            raise FatalStorageError(f"Storage unavailable under {self.root}: {exc}") from exc
        message = exc.strerror or str(exc)
        logger.debug(f"Skipping {path}: {message}")
        if self.on_warning:
            self.on_warning(ScanWarning(path=path, stage="walk", message=message))
