# codebase_resolver/agent/nodes/expand_archive.py
from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..state import ResolveState
from .resolve_entity import UNSUPPORTED_SOURCE_MESSAGE
from ...core.errors import CodebaseCreationError, CreationFailure
from ...tools.archive import OutcomeKind, expand_to_directory
from ...tools.storage_layer import Storage


def make_expand_archive_node(storage: Storage, extract_root: Optional[Path] = None):
    def expand_archive(state: ResolveState) -> ResolveState:
        source = Path(state["source_path"])
        outcome = expand_to_directory(source, storage=storage, extract_root=extract_root)

        if outcome.kind is OutcomeKind.NOT_AN_ARCHIVE:
            raise CodebaseCreationError(
                UNSUPPORTED_SOURCE_MESSAGE,
                reason=CreationFailure.UNSUPPORTED_SOURCE,
                path=source,
            )
        if outcome.kind is OutcomeKind.FAILED:
            raise CodebaseCreationError(
                f"Could not extract archive '{source}': {outcome.cause}",
                reason=CreationFailure.EXTRACTION_FAILED,
                path=source,
            ) from outcome.cause

        state["directory"] = str(outcome.directory)
        state.setdefault("events", []).append({"node": "expand_archive", "ok": True, "directory": state["directory"]})
        return state
    return expand_archive
