"""Extension to category lookup."""

from typing import Iterable

from ..models.common import FileCategory, FileRecord

_CATEGORY_EXTENSIONS = {
    FileCategory.IMAGE: (
        ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".webp", ".heic", ".heif",
        ".tiff", ".tif", ".svg", ".ico", ".raw", ".cr2", ".nef",
    ),
    FileCategory.DOCUMENT: (
        ".pdf", ".doc", ".docx", ".txt", ".rtf", ".odt", ".pages", ".xls",
        ".xlsx", ".ods", ".csv", ".ppt", ".pptx", ".odp", ".key", ".epub", ".md",
    ),
    FileCategory.VIDEO: (
        ".mp4", ".mov", ".avi", ".mkv", ".wmv", ".m4v", ".flv", ".webm", ".mpg", ".mpeg",
    ),
    FileCategory.AUDIO: (
        ".mp3", ".wav", ".aac", ".flac", ".m4a", ".ogg", ".wma", ".aiff", ".opus",
    ),
    FileCategory.ARCHIVE: (
        ".zip", ".rar", ".7z", ".tar", ".gz", ".tgz", ".bz2", ".xz", ".dmg", ".iso",
    ),
    FileCategory.CODE: (
        ".py", ".js", ".ts", ".jsx", ".tsx", ".html", ".css", ".json", ".yaml",
        ".yml", ".xml", ".sh", ".go", ".rs", ".java", ".c", ".cpp", ".h", ".hpp",
        ".cs", ".rb", ".php", ".swift", ".kt", ".sql",
    ),
}

EXTENSION_CATEGORIES: dict[str, FileCategory] = {
    ext: category
    for category, extensions in _CATEGORY_EXTENSIONS.items()
    for ext in extensions
}


def normalize_extension(extension: str) -> str:
    ext = (extension or "").strip().lower()
    if ext and not ext.startswith("."):
        ext = f".{ext}"
    return ext


def categorize(extension: str) -> FileCategory:
    """Map an extension (with or without leading dot) to its category."""
    return EXTENSION_CATEGORIES.get(normalize_extension(extension), FileCategory.OTHER)


def group_by_category(records: Iterable[FileRecord]) -> dict[str, list[FileRecord]]:
    categories: dict[str, list[FileRecord]] = {}
    for record in records:
        categories.setdefault(record.category.value, []).append(record)
    return categories
