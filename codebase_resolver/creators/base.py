"""
The creator interface shared by every codebase source kind.

A creator turns a map of string options into a Codebase. Some variants can
also report the project space they produce; those that can't return an
unsupported ProjectSpaceLookup, so callers must check before using the value.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Mapping

from ..core.errors import CodebaseCreationError, CreationFailure
from ..core.models import Codebase, ProjectSpaceLookup


def check_keys(options: Mapping[str, str], allowed: Iterable[str]) -> None:
    """Raise unless every key of `options` is in `allowed`."""
    allowed = set(allowed)
    unknown = sorted(k for k in options if k not in allowed)
    if unknown:
        raise CodebaseCreationError(
            f"Options contained invalid keys: {', '.join(unknown)} (allowed: {', '.join(sorted(allowed))})",
            reason=CreationFailure.INVALID_OPTION,
        )


class CodebaseCreator(ABC):
    @abstractmethod
    def create(self, options: Mapping[str, str]) -> Codebase: ...

    @abstractmethod
    def project_space(self) -> ProjectSpaceLookup: ...


__all__ = ["CodebaseCreator", "check_keys"]
