"""Directory access checks."""

import os
from pathlib import Path

from ..errors import InputError
from ..models.system import DirectoryValidation


def validate_directory(directory: str) -> DirectoryValidation:
    """Check that a path exists, is a directory and can be listed."""
    if not directory or not directory.strip():
        return DirectoryValidation(valid=False, message="Directory path is required")

    p = Path(directory.strip()).expanduser()
    try:
        if not p.exists():
            return DirectoryValidation(valid=False, message="Directory does not exist")
        if not p.is_dir():
            return DirectoryValidation(valid=False, message="Path is not a directory")
        if not os.access(str(p), os.R_OK | os.X_OK):
            return DirectoryValidation(valid=False, message="Directory is not readable")
    except OSError as e:
        return DirectoryValidation(valid=False, message=f"Error validating directory: {e}")

    return DirectoryValidation(valid=True, message="Directory is valid and accessible")


def resolve_scan_root(directory: str) -> str:
    """Absolute, symlink-free form of a valid directory; raises InputError otherwise."""
    check = validate_directory(directory)
    if not check.valid:
        raise InputError(f"{check.message}: {directory}")
    return str(Path(directory.strip()).expanduser().resolve())
