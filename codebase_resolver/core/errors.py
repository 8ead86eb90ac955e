from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional


class CreationFailure(str, Enum):
    """Which step of codebase creation failed."""
    INVALID_OPTION = "invalid_option"
    MISSING_PATH = "missing_path"
    PATH_NOT_FOUND = "path_not_found"
    UNSUPPORTED_SOURCE = "unsupported_source"
    EXTRACTION_FAILED = "extraction_failed"
    UNSUPPORTED_OPERATION = "unsupported_operation"


class CodebaseCreationError(RuntimeError):
    """Raised when a codebase cannot be created. `reason` says which step failed."""

    def __init__(self, message: str, *, reason: CreationFailure, path: Optional[Path | str] = None):
        super().__init__(message)
        self.reason = reason
        self.path = Path(path) if path is not None else None


class UnsafeArchiveError(RuntimeError):
    """An archive member would be written outside the extraction directory."""


__all__ = ["CreationFailure", "CodebaseCreationError", "UnsafeArchiveError"]
