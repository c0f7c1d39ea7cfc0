"""
Unit tests for the Walker: ordering, depth, symlinks and skipped entries.
"""
import errno
import sys
import os

import pytest

from duplicate_remover.errors import FatalStorageError, InputError
from duplicate_remover.scanners.walker import Walker


class TestWalker:

    def test_yields_every_regular_file_depth_first_sorted(self, nested_tree, scan_root):
        paths = list(Walker(str(scan_root)).walk())

        assert paths == [
            str(scan_root / "docs" / "report.pdf"),
            str(scan_root / "docs" / "scan.jpg"),
            str(scan_root / "notes"),
            str(scan_root / "photos" / "2023" / "IMG_0001.JPG"),
            str(scan_root / "photos" / "copy.jpg"),
            str(scan_root / "photos" / "rename.py"),
            str(scan_root / "report (1).pdf"),
            str(scan_root / "song.mp3"),
        ]
        assert all(os.path.isabs(p) for p in paths)

    def test_each_call_restarts_the_walk(self, abc_tree, scan_root):
        walker = Walker(str(scan_root))
        first = list(walker.walk())
        second = list(walker.walk())
        assert first == second
        assert len(first) == 3

    def test_is_lazy(self, abc_tree, scan_root):
        it = Walker(str(scan_root)).walk()
        assert next(it) == str(abc_tree["a"])

    def test_symlinks_are_not_followed(self, abc_tree, scan_root, tmp_path):
        outside = tmp_path / "outside"
        outside.mkdir()
        (outside / "secret.txt").write_text("elsewhere")
        os.symlink(outside, scan_root / "linked-dir")
        os.symlink(abc_tree["a"], scan_root / "link-to-a.txt")
        os.symlink(scan_root, scan_root / "loop")

        paths = list(Walker(str(scan_root)).walk())

        assert paths == [str(abc_tree["a"]), str(abc_tree["b"]), str(abc_tree["c"])]

    def test_unreadable_subdirectory_is_skipped_with_warning(self, nested_tree, scan_root, monkeypatch):
        blocked = str(scan_root / "photos")
        real_list_dir = Walker._list_dir

        def list_dir(path):
            if path == blocked:
                raise PermissionError(errno.EACCES, "Permission denied", path)
            return real_list_dir(path)

        monkeypatch.setattr(Walker, "_list_dir", staticmethod(list_dir))
        warnings = []

        paths = list(Walker(str(scan_root), on_warning=warnings.append).walk())

        assert not any(p.startswith(blocked + os.sep) for p in paths)
        assert str(scan_root / "song.mp3") in paths
        assert len(warnings) == 1
        assert warnings[0].path == blocked
        assert warnings[0].stage == "walk"
        assert warnings[0].message == "Permission denied"

    def test_missing_root_is_input_error(self, tmp_path):
        with pytest.raises(InputError):
            Walker(str(tmp_path / "nope")).walk()

    def test_storage_failure_in_subdirectory_is_fatal(self, nested_tree, scan_root, monkeypatch):
        real_list_dir = Walker._list_dir

        def list_dir(path):
            if path.endswith("docs"):
                raise OSError(errno.EIO, "Input/output error", path)
            return real_list_dir(path)

        monkeypatch.setattr(Walker, "_list_dir", staticmethod(list_dir))

        with pytest.raises(FatalStorageError):
            list(Walker(str(scan_root)).walk())

    def test_tree_deeper_than_the_recursion_limit(self, scan_root, nested_dirs):
        depth = sys.getrecursionlimit() + 100
        deepest = nested_dirs(str(scan_root), depth)
        with open(os.path.join(deepest, "bottom.txt"), "w") as f:
            f.write("deep")
        (scan_root / "g.txt").write_text("sibling")

        warnings = []
        paths = list(Walker(str(scan_root), on_warning=warnings.append).walk())

        assert paths == [os.path.join(deepest, "bottom.txt"), str(scan_root / "g.txt")]
        assert warnings == []
