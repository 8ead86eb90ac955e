"""
Filesystem capability used by codebase creators.

Usage pattern:
    from codebase_resolver.tools.storage_layer import STORAGE
    # or pass any Storage implementation to FileCodebaseCreator(storage=...)

Creators only ever touch the filesystem through a Storage, so tests can hand
in an in-memory fake and a different backend can be swapped in without
touching the resolver.
"""
from __future__ import annotations

from pathlib import Path
import shutil
import tarfile
import tempfile
import zlib

from ..core.errors import UnsafeArchiveError


class Storage:
    # Existence/metadata
    def exists(self, path: Path) -> bool: raise NotImplementedError
    def is_file(self, path: Path) -> bool: raise NotImplementedError
    def is_dir(self, path: Path) -> bool: raise NotImplementedError

    # Directory management
    def make_unique_dir(self, parent: Path, prefix: str) -> Path: raise NotImplementedError
    def remove_tree(self, path: Path) -> None: raise NotImplementedError

    # Archives
    def extract_archive(self, archive_path: Path, dest_dir: Path) -> Path:
        """Expand every entry of `archive_path` into the existing `dest_dir`.

        Raises one of EXTRACTION_ERRORS on failure.
        """
        raise NotImplementedError


class LocalStorage(Storage):
    """Filesystem-backed implementation."""

    # Existence/metadata
    # A dangling symlink exists (as a link) but is neither a file nor a directory.
    def exists(self, path: Path) -> bool: return Path(path).exists() or Path(path).is_symlink()
    def is_file(self, path: Path) -> bool: return Path(path).is_file()
    def is_dir(self, path: Path) -> bool: return Path(path).is_dir()

    # Directory management
    def make_unique_dir(self, parent: Path, prefix: str) -> Path:
        parent = Path(parent)
        parent.mkdir(parents=True, exist_ok=True)
        return Path(tempfile.mkdtemp(prefix=prefix, dir=parent))

    def remove_tree(self, path: Path) -> None:
        p = Path(path)
        if p.exists():
            shutil.rmtree(p)

    # Archives
    def extract_archive(self, archive_path: Path, dest_dir: Path) -> Path:
        archive_path = Path(archive_path)
        dest_dir = Path(dest_dir)
        # r:* auto-detects plain vs gzip-compressed tar
        with tarfile.open(archive_path, "r:*") as tf:
            members = tf.getmembers()
            for m in members:
                _guard_member(dest_dir, m)
            tf.extractall(dest_dir, filter="data")
        return dest_dir


def _guard_no_traversal(root: Path, target: Path) -> None:
    try:
        root_resolved = Path(root).resolve()
        target_resolved = Path(target).resolve()
    except ValueError as exc:
        # e.g. a pax path header carrying an embedded NUL byte
        raise UnsafeArchiveError(f"Invalid archive member name: {str(target)!r}") from exc
    if target_resolved != root_resolved and root_resolved not in target_resolved.parents:
        raise UnsafeArchiveError(f"Blocked archive path traversal: {target}")


def _guard_member(root: Path, member: tarfile.TarInfo) -> None:
    target = Path(root) / member.name
    _guard_no_traversal(root, target)
    if member.issym():
        # symlink targets are relative to the link's own directory
        _guard_no_traversal(root, target.parent / member.linkname)
    elif member.islnk():
        _guard_no_traversal(root, Path(root) / member.linkname)


# Everything a Storage may raise when an archive can't be expanded.
EXTRACTION_ERRORS: tuple[type[BaseException], ...] = (
    tarfile.TarError,
    OSError,
    EOFError,
    zlib.error,
    ValueError,
    UnsafeArchiveError,
)

# Default backend instance. Swap this to change storage backend.
STORAGE: Storage = LocalStorage()

__all__ = [
    "Storage",
    "LocalStorage",
    "STORAGE",
    "EXTRACTION_ERRORS",
]
