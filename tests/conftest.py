"""
Shared fixtures: temporary directory trees with known duplicate layouts
and a fresh ScanManager per test.
"""
import os
import time
from pathlib import Path
from typing import Dict

import pytest

from duplicate_remover.services.deletion_manager import DeletionManager
from duplicate_remover.services.recent_directories import RecentDirectories
from duplicate_remover.services.scan_manager import ScanManager


@pytest.fixture
def scan_root(tmp_path) -> Path:
    root = tmp_path / "scan-root"
    root.mkdir()
    return root.resolve()


@pytest.fixture
def abc_tree(scan_root) -> Dict[str, Path]:
    """
    a.txt and b.txt share content "x", c.txt holds "y".
    a.txt sorts first, so it is discovered first and is the canonical copy.
    """
    files = {
        "a": scan_root / "a.txt",
        "b": scan_root / "b.txt",
        "c": scan_root / "c.txt",
    }
    files["a"].write_bytes(b"x")
    files["b"].write_bytes(b"x")
    files["c"].write_bytes(b"y")
    return files


@pytest.fixture
def nested_tree(scan_root) -> Dict[str, Path]:
    """
    Three copies of one photo spread over subdirectories, a duplicated
    document pair, and unique files of several categories.
    """
    (scan_root / "photos" / "2023").mkdir(parents=True)
    (scan_root / "docs").mkdir()

    photo = b"\xff\xd8\xff" + b"P" * 4096
    report = b"quarterly report " * 200

    files = {
        "photo_1": scan_root / "docs" / "scan.jpg",
        "photo_2": scan_root / "photos" / "2023" / "IMG_0001.JPG",
        "photo_3": scan_root / "photos" / "copy.jpg",
        "report_1": scan_root / "docs" / "report.pdf",
        "report_2": scan_root / "report (1).pdf",
        "song": scan_root / "song.mp3",
        "script": scan_root / "photos" / "rename.py",
        "notes": scan_root / "notes",
    }
    for key in ("photo_1", "photo_2", "photo_3"):
        files[key].write_bytes(photo)
    files["report_1"].write_bytes(report)
    files["report_2"].write_bytes(report)
    files["song"].write_bytes(b"ID3" + b"S" * 1024)
    files["script"].write_text("print('hello')\n")
    files["notes"].write_text("no extension\n")
    return files


@pytest.fixture
def scan_manager() -> ScanManager:
    return ScanManager(
        recent_directories=RecentDirectories(limit=5),
        hash_workers=2,
        walk_batch_size=2,
        progress_notify_interval=0.0,
    )


@pytest.fixture
def deletion_manager(scan_manager) -> DeletionManager:
    return DeletionManager(scan_manager)


@pytest.fixture
def slow_hashing(monkeypatch):
    """Delay every file record build so a scan stays RUNNING long enough to interact with."""
    from duplicate_remover.services import scan_manager as scan_manager_module

    real_build = scan_manager_module.build_file_record

    def slow_build(path, chunk_size):
        time.sleep(0.1)
        return real_build(path, chunk_size)

    monkeypatch.setattr(scan_manager_module, "build_file_record", slow_build)


@pytest.fixture
def nested_dirs():
    """
    Factory for ``root/d/d/.../d`` chains, created and removed one level at a
    time; os.makedirs and older shutil.rmtree recurse once per level.
    """
    created = []

    def make(root, depth: int) -> str:
        path = str(root)
        for _ in range(depth):
            path = os.path.join(path, "d")
            os.mkdir(path)
            created.append(path)
        return path

    yield make

    for path in reversed(created):
        for name in os.listdir(path):
            if name != "d":
                os.remove(os.path.join(path, name))
        os.rmdir(path)
