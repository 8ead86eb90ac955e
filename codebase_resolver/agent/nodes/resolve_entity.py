# codebase_resolver/agent/nodes/resolve_entity.py
from __future__ import annotations

from pathlib import Path

from ..state import ResolveState, PATH_OPTION
from ...core.errors import CodebaseCreationError, CreationFailure
from ...core.models import SourceKind
from ...tools.storage_layer import Storage

UNSUPPORTED_SOURCE_MESSAGE = (
    f"The '{PATH_OPTION}'-option of a FileCodebaseCreator must specify either a directory "
    "or a .tar/.tar.gz-archive"
)


def make_resolve_entity_node(storage: Storage):
    def resolve_entity(state: ResolveState) -> ResolveState:
        """Classify the source path. Directories resolve to themselves right away;
        regular files are left for expand_archive; anything else is rejected.
        """
        source = Path(state["source_path"])
        if not storage.exists(source):
            raise CodebaseCreationError(
                f'The specified codebase path "{source}" does not exist.',
                reason=CreationFailure.PATH_NOT_FOUND,
                path=source,
            )

        if storage.is_dir(source):
            kind = SourceKind.DIRECTORY
            state["directory"] = state["source_path"]
        elif storage.is_file(source):
            kind = SourceKind.FILE
        else:
            raise CodebaseCreationError(
                UNSUPPORTED_SOURCE_MESSAGE,
                reason=CreationFailure.UNSUPPORTED_SOURCE,
                path=source,
            )

        state["source_kind"] = kind.value
        state.setdefault("events", []).append({"node": "resolve_entity", "ok": True, "kind": kind.value})
        return state
    return resolve_entity
