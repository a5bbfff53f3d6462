from __future__ import annotations

import os
from pathlib import Path

import pytest

SCENARIO_FILES = [
    "dir1/4file.txt",
    "dir1/fil5e.txt",
    "dir1/file3.txt",
    "dir2/file2.txt",
    "dir2/FILE3.txt",
    "DIR3/FiLe1OnE.txT",
    "file-or-dir",
]


def touch(p: Path, data: bytes = b"") -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_bytes(data)


def rel(*parts: str) -> str:
    """Build an expected output path under ``test-dir`` with host separators."""
    return os.path.join("test-dir", *parts)


@pytest.fixture
def scenario(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """Create the reference tree under ``tmp_path/test-dir`` and chdir next to it."""
    root = tmp_path / "test-dir"
    for name in SCENARIO_FILES:
        touch(root / name, b"hi")
    (root / "dir2" / "file-or-dir").mkdir()
    monkeypatch.chdir(tmp_path)
    return "test-dir"
