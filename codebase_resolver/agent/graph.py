from __future__ import annotations

from langgraph.graph import StateGraph, START, END
from langchain_core.runnables import RunnableLambda
from pathlib import Path
from typing import Optional

import logging

from .state import ResolveState
from ..tools.storage_layer import Storage

# Node Imports
from .nodes.validate_options import validate_options
from .nodes.extract_path import extract_path
from .nodes.resolve_entity import make_resolve_entity_node
from .nodes.expand_archive import make_expand_archive_node
from .nodes.assemble import assemble

# Routing Imports
from .nodes.router import route_after_resolve

logger = logging.getLogger(__name__)


# Progress logging wrappers, enabled with CODEBASE_PROGRESS_LOG=1

def _snapshot_lines(tag: str, s: dict) -> list[str]:
    last_ev = (s.get("events") or [{}])[-1] if isinstance(s, dict) and s.get("events") else {}
    return [
        f"===== {tag} =====",
        f"node: {last_ev.get('node')}",
        f"source_path: {s.get('source_path') if isinstance(s, dict) else None}",
        f"source_kind: {s.get('source_kind') if isinstance(s, dict) else None}",
        f"directory: {s.get('directory') if isinstance(s, dict) else None}",
    ]


def _maybe_wrap(name: str, fn, enabled: bool):
    if not enabled:
        return fn

    def _wrapped(state):
        res = fn(state)
        for ln in _snapshot_lines(name, res):
            logger.debug(ln)
        return res

    return _wrapped


def build_resolve_graph(storage: Storage, *, extract_root: Optional[Path] = None, progress_log: bool = False):
    """Compile the validate -> extract path -> resolve -> (expand) -> assemble pipeline.

    Every node raises CodebaseCreationError on failure, which ends the run.
    """
    g = StateGraph(ResolveState)

    # Register nodes (optionally wrapped for progress logging)
    g.add_node("validate_options", RunnableLambda(_maybe_wrap("validate_options", validate_options, progress_log)))
    g.add_node("extract_path", RunnableLambda(_maybe_wrap("extract_path", extract_path, progress_log)))
    g.add_node("resolve_entity", RunnableLambda(_maybe_wrap("resolve_entity", make_resolve_entity_node(storage), progress_log)))
    g.add_node("expand_archive", RunnableLambda(_maybe_wrap("expand_archive", make_expand_archive_node(storage, extract_root), progress_log)))
    g.add_node("assemble", RunnableLambda(_maybe_wrap("assemble", assemble, progress_log)))

    # Define edges
    g.add_edge(START, "validate_options")
    g.add_edge("validate_options", "extract_path")
    g.add_edge("extract_path", "resolve_entity")
    g.add_conditional_edges("resolve_entity", route_after_resolve, {
        "expand_archive": "expand_archive",
        "assemble": "assemble",
    })
    g.add_edge("expand_archive", "assemble")
    g.add_edge("assemble", END)

    return g.compile()
