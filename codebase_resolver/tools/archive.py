"""
Archive expansion for file-based codebases.

Responsibilities:
- decide whether a regular file is a supported archive (.tar, .tar.gz, .tgz)
- expand it into a fresh directory that no other call will reuse
- report the outcome as a tagged value instead of raising

Usage:
    from codebase_resolver.tools.archive import expand_to_directory

    outcome = expand_to_directory(Path("releases/src-1.2.tar.gz"))
    if outcome.kind is OutcomeKind.EXTRACTED:
        print(outcome.directory)

Design notes:
- Detection is by file name. A correctly named but unreadable archive is a
  failure, never "not an archive".
- The source archive is never modified.
- On failure the half-written directory is removed best-effort.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
from pathlib import Path
from typing import Optional

from .storage_layer import EXTRACTION_ERRORS, STORAGE, Storage
from .workspace import ARCHIVE_SUFFIXES, make_extraction_dir

logger = logging.getLogger(__name__)


class OutcomeKind(str, Enum):
    EXTRACTED = "extracted"
    NOT_AN_ARCHIVE = "not_an_archive"
    FAILED = "failed"


@dataclass(frozen=True)
class ArchiveOutcome:
    kind: OutcomeKind
    source: Path
    directory: Optional[Path] = None
    cause: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.kind is not OutcomeKind.FAILED


def is_supported_archive(path: Path | str) -> bool:
    return Path(path).name.lower().endswith(ARCHIVE_SUFFIXES)


def expand_to_directory(
    source: Path | str,
    *,
    storage: Storage = STORAGE,
    extract_root: Optional[Path | str] = None,
) -> ArchiveOutcome:
    """Expand `source` into a new directory if it is a supported archive.

    `source` must be an existing regular file. Returns:
    - EXTRACTED with `directory` set to the new directory
    - NOT_AN_ARCHIVE with `directory` set to `source` unchanged
    - FAILED with `cause` set to the underlying exception
    """
    source = Path(source)
    if not is_supported_archive(source):
        return ArchiveOutcome(OutcomeKind.NOT_AN_ARCHIVE, source, directory=source)

    dest: Optional[Path] = None
    try:
        dest = make_extraction_dir(storage, source, extract_root)
        storage.extract_archive(source, dest)
    except EXTRACTION_ERRORS as exc:
        if dest is not None:
            _discard(storage, dest)
        return ArchiveOutcome(OutcomeKind.FAILED, source, cause=exc)

    logger.info("Expanded archive %s into %s", source, dest)
    return ArchiveOutcome(OutcomeKind.EXTRACTED, source, directory=dest)


def _discard(storage: Storage, dest: Path) -> None:
    try:
        storage.remove_tree(dest)
    except OSError as exc:
        logger.warning("Could not remove partial extraction %s: %s", dest, exc)


__all__ = ["OutcomeKind", "ArchiveOutcome", "is_supported_archive", "expand_to_directory"]
