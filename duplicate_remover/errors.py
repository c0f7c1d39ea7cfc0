"""Exception hierarchy for the scan and deletion engine."""


class DuplicateRemoverError(Exception):
    """Base exception for duplicate-remover."""


class InputError(DuplicateRemoverError):
    """Scan root is missing, not a directory, or unreadable."""


class TransientFileError(DuplicateRemoverError):
    """A single file or subdirectory could not be read; the scan continues."""

    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


class FatalStorageError(DuplicateRemoverError):
    """The filesystem under the scan root became unavailable."""


class ScanNotFoundError(DuplicateRemoverError):
    """No scan is registered under the given identifier."""

    def __init__(self, scan_id: str):
        super().__init__(f"Scan not found: {scan_id}")
        self.scan_id = scan_id


class ScanConflictError(DuplicateRemoverError):
    """A scan of the same directory is already pending or running."""

    def __init__(self, directory: str, scan_id: str):
        super().__init__(f"Directory {directory} is already being scanned ({scan_id})")
        self.directory = directory
        self.scan_id = scan_id


class DeletionValidationError(DuplicateRemoverError):
    """A requested path may not be deleted for this scan."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class InvalidTransitionError(DuplicateRemoverError):
    """Scan status change that would regress or leave a terminal state."""
