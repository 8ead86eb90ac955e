from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import pytest

from codebase_resolver.config import Settings
from codebase_resolver.core.errors import CodebaseCreationError, CreationFailure
from codebase_resolver.creators.file_creator import FileCodebaseCreator
from codebase_resolver.tools.storage_layer import Storage


class _FakeStorage(Storage):
    """In-memory filesystem: a set of directories and a set of files."""

    def __init__(self, dirs=(), files=(), extract_error: BaseException | None = None):
        self.dirs = {Path(d) for d in dirs}
        self.files = {Path(f) for f in files}
        self.extract_error = extract_error
        self.made: List[Path] = []
        self.removed: List[Path] = []
        self.extracted: List[tuple[Path, Path]] = []

    def exists(self, path: Path) -> bool:
        return Path(path) in self.dirs or Path(path) in self.files

    def is_file(self, path: Path) -> bool:
        return Path(path) in self.files

    def is_dir(self, path: Path) -> bool:
        return Path(path) in self.dirs

    def make_unique_dir(self, parent: Path, prefix: str) -> Path:
        d = Path(parent) / f"{prefix}{len(self.made)}"
        self.made.append(d)
        self.dirs.add(d)
        return d

    def remove_tree(self, path: Path) -> None:
        self.removed.append(Path(path))
        self.dirs.discard(Path(path))

    def extract_archive(self, archive_path: Path, dest_dir: Path) -> Path:
        if self.extract_error is not None:
            raise self.extract_error
        self.extracted.append((Path(archive_path), Path(dest_dir)))
        return dest_dir


def _creator(storage: Storage) -> FileCodebaseCreator:
    return FileCodebaseCreator(storage, extract_root=Path("/scratch"), settings=Settings())


def test_directory_never_touches_extraction():
    fs = _FakeStorage(dirs=["/repo/src"])
    cb = _creator(fs).create({"path": "/repo/src"})
    assert cb.directory == Path("/repo/src")
    assert fs.made == [] and fs.extracted == []


def test_archive_goes_through_storage():
    fs = _FakeStorage(files=["/repo/src-1.2.tar.gz"])
    cb = _creator(fs).create({"path": "/repo/src-1.2.tar.gz"})
    assert fs.extracted == [(Path("/repo/src-1.2.tar.gz"), cb.directory)]
    assert cb.directory.parent == Path("/scratch")
    assert "_src-1.2_" in cb.directory.name


def test_extraction_error_is_wrapped_and_cleaned_up():
    fs = _FakeStorage(files=["/repo/src.tar"], extract_error=OSError("disk full"))
    with pytest.raises(CodebaseCreationError) as ei:
        _creator(fs).create({"path": "/repo/src.tar"})
    assert ei.value.reason is CreationFailure.EXTRACTION_FAILED
    assert "/repo/src.tar" in str(ei.value)
    assert "disk full" in str(ei.value)
    assert fs.removed == fs.made


def test_failed_cleanup_keeps_extraction_error(caplog: pytest.LogCaptureFixture):
    class _StickyStorage(_FakeStorage):
        def remove_tree(self, path: Path) -> None:
            raise OSError("device busy")

    fs = _StickyStorage(files=["/repo/src.tar"], extract_error=OSError("disk full"))
    caplog.set_level(logging.WARNING, logger="codebase_resolver.tools.archive")
    with pytest.raises(CodebaseCreationError) as ei:
        _creator(fs).create({"path": "/repo/src.tar"})
    assert ei.value.reason is CreationFailure.EXTRACTION_FAILED
    assert "disk full" in str(ei.value)
    assert str(ei.value.__cause__) == "disk full"
    assert any(
        r.levelno == logging.WARNING and "device busy" in r.getMessage() for r in caplog.records
    )


def test_neither_file_nor_directory():
    class _SpecialStorage(_FakeStorage):
        def exists(self, path: Path) -> bool:
            return True

    with pytest.raises(CodebaseCreationError) as ei:
        _creator(_SpecialStorage()).create({"path": "/dev/null"})
    assert ei.value.reason is CreationFailure.UNSUPPORTED_SOURCE
