"""
Creates a codebase from a local directory or a .tar/.tar.gz archive.

    creator = FileCodebaseCreator()
    codebase = creator.create({"path": "releases/src-1.2.tar.gz", "projectspace": "internal"})
    codebase.directory      # freshly expanded directory, now owned by the caller
    codebase.project_space  # "internal"

Directories are used in place (no copy). Archives are expanded into a new
directory on every call; the creator keeps no state between calls and never
deletes what it returns.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .base import CodebaseCreator
from ..agent.graph import build_resolve_graph
from ..config import Settings, load_settings
from ..core.models import Codebase, ProjectSpaceLookup
from ..tools.storage_layer import STORAGE, Storage

logger = logging.getLogger(__name__)


class FileCodebaseCreator(CodebaseCreator):
    def __init__(
        self,
        storage: Storage = STORAGE,
        *,
        extract_root: Optional[Path | str] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or load_settings()
        self.storage = storage
        self.extract_root = Path(extract_root) if extract_root is not None else settings.extract_root
        self._graph = build_resolve_graph(
            storage,
            extract_root=self.extract_root,
            progress_log=settings.progress_log,
        )

    def project_space(self) -> ProjectSpaceLookup:
        # Only known per create() call; the creator does not keep the options.
        return ProjectSpaceLookup.unsupported(
            "The project_space() operation is not available for a FileCodebaseCreator."
        )

    def resolve(self, options: Mapping[str, str]) -> Dict[str, Any]:
        """Run the resolver and return its final state (codebase plus per-node events)."""
        return self._graph.invoke({"options": dict(options), "events": []})

    def create(self, options: Mapping[str, str]) -> Codebase:
        codebase = self.resolve(options)["codebase"]
        logger.info("Created codebase %s at %s", codebase, codebase.directory)
        return codebase


__all__ = ["FileCodebaseCreator"]
