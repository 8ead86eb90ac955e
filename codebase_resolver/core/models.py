"""
Value types produced by codebase creators.

A Codebase is a directory plus a project-space label and the expression that
produced it. Instances are immutable; the backing directory belongs to the
caller once returned (creators never clean it up).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from .errors import CodebaseCreationError, CreationFailure

DEFAULT_PROJECT_SPACE = "public"


class SourceKind(str, Enum):
    """What a resolved source path turned out to be."""
    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class Term:
    """An identifier applied to a set of string options, e.g. file(path="...")."""
    identifier: str
    options: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # detach from the caller's dict so later mutation can't leak in
        frozen = MappingProxyType(dict(sorted(self.options.items())))
        object.__setattr__(self, "options", frozen)

    def __str__(self) -> str:
        rendered = ",".join(f'{k}="{v}"' for k, v in self.options.items())
        return f"{self.identifier}({rendered})"


@dataclass(frozen=True)
class CodebaseExpression:
    """Opaque provenance record: how a codebase was created."""
    creation_term: Term

    def __str__(self) -> str:
        return str(self.creation_term)


@dataclass(frozen=True)
class Codebase:
    directory: Path
    project_space: str
    expression: CodebaseExpression

    @property
    def path(self) -> Path:
        return self.directory

    def relative_filenames(self) -> set[str]:
        """Every file below the directory, relative to it, using '/' separators."""
        root = Path(self.directory)
        return {p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file()}

    def __str__(self) -> str:
        return str(self.expression)


@dataclass(frozen=True)
class ProjectSpaceLookup:
    """Result of asking a creator for its project space.

    Not every creator variant can answer; check `supported` (or call `unwrap`)
    instead of assuming a value is present.
    """
    supported: bool
    value: Optional[str] = None
    reason: str = ""

    @classmethod
    def of(cls, value: str) -> "ProjectSpaceLookup":
        return cls(supported=True, value=value)

    @classmethod
    def unsupported(cls, reason: str) -> "ProjectSpaceLookup":
        return cls(supported=False, reason=reason)

    def unwrap(self) -> str:
        if not self.supported:
            raise CodebaseCreationError(self.reason, reason=CreationFailure.UNSUPPORTED_OPERATION)
        return self.value  # type: ignore[return-value]


__all__ = [
    "DEFAULT_PROJECT_SPACE",
    "SourceKind",
    "Term",
    "CodebaseExpression",
    "Codebase",
    "ProjectSpaceLookup",
]
