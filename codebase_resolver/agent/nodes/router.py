# codebase_resolver/agent/nodes/router.py
from __future__ import annotations

from ..state import ResolveState
from ...core.models import SourceKind


def route_after_resolve(state: ResolveState) -> str:
    """Directories are already usable; regular files may be archives."""
    if state.get("source_kind") == SourceKind.FILE.value:
        return "expand_archive"
    return "assemble"
