"""
Extraction directory naming.

Each archive expansion gets its own directory under an extraction root:
    <extract_root>/<YYYYMMDD_HHMMSS>_<archive-stem>_<random>/

The random suffix comes from the storage backend (mkdtemp on local disk), so
two expansions of the same archive, even within the same second, never share
or overwrite a directory.
"""
from __future__ import annotations

from pathlib import Path
import tempfile
import time
from typing import Optional

from .storage_layer import Storage

ARCHIVE_SUFFIXES: tuple[str, ...] = (".tar.gz", ".tgz", ".tar")


def _timestamp() -> str:
    return time.strftime("%Y%m%d_%H%M%S")


def _sanitize_token(token: str) -> str:
    """Make a token safe for filesystem names (conservative).
    Lowercase, keep alnum, dash, underscore, and dot; replace others with '-'.
    """
    safe = []
    for ch in token.strip():
        if ch.isalnum() or ch in {"-", "_", "."}:
            safe.append(ch)
        else:
            safe.append("-")
    return ("".join(safe)).lower().strip("-") or "codebase"


def archive_stem(archive_path: Path | str) -> str:
    """File name without its archive suffix: 'src-1.2.tar.gz' -> 'src-1.2'."""
    name = Path(archive_path).name
    lowered = name.lower()
    for suffix in ARCHIVE_SUFFIXES:
        if lowered.endswith(suffix):
            return name[: -len(suffix)]
    return Path(name).stem


def default_extract_root() -> Path:
    return Path(tempfile.gettempdir())


def make_extraction_dir(storage: Storage, archive_path: Path | str, extract_root: Optional[Path | str] = None) -> Path:
    """Create and return a fresh, empty directory for expanding `archive_path`."""
    root = Path(extract_root) if extract_root is not None else default_extract_root()
    prefix = f"{_timestamp()}_{_sanitize_token(archive_stem(archive_path))}_"
    return storage.make_unique_dir(root, prefix)
