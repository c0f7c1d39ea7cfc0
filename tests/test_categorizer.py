"""
Unit tests for the extension to category lookup.
"""
import pytest

from duplicate_remover.models.common import FileCategory
from duplicate_remover.scanners.categorizer import categorize, group_by_category, normalize_extension
from tests.factories import make_record


class TestCategorize:

    @pytest.mark.parametrize("extension, expected", [
        (".jpg", FileCategory.IMAGE),
        (".pdf", FileCategory.DOCUMENT),
        (".mkv", FileCategory.VIDEO),
        (".flac", FileCategory.AUDIO),
        (".zip", FileCategory.ARCHIVE),
        (".py", FileCategory.CODE),
    ])
    def test_known_extensions(self, extension, expected):
        assert categorize(extension) is expected

    def test_case_and_leading_dot_are_ignored(self):
        assert categorize("JPG") is FileCategory.IMAGE
        assert categorize(".Mp4") is FileCategory.VIDEO

    def test_unknown_and_missing_extensions_fall_back_to_other(self):
        assert categorize(".xyz123") is FileCategory.OTHER
        assert categorize("") is FileCategory.OTHER

    def test_normalize_extension(self):
        assert normalize_extension(" TXT ") == ".txt"
        assert normalize_extension("") == ""


class TestGroupByCategory:

    def test_keeps_discovery_order_within_category(self):
        first = make_record("/r/one.png", "h1", category=FileCategory.IMAGE)
        doc = make_record("/r/two.pdf", "h2", category=FileCategory.DOCUMENT)
        second = make_record("/r/three.gif", "h3", category=FileCategory.IMAGE)

        categories = group_by_category([first, doc, second])

        assert list(categories) == ["image", "document"]
        assert [r.file_path for r in categories["image"]] == ["/r/one.png", "/r/three.gif"]
