from typing import TypedDict, Optional, Dict, Any, List

from ..core.models import Codebase

PATH_OPTION = "path"
PROJECT_SPACE_OPTION = "projectspace"
RECOGNIZED_OPTIONS = frozenset({PATH_OPTION, PROJECT_SPACE_OPTION})


class ResolveState(TypedDict, total=False):
    # Core input
    options: Dict[str, str]

    # Filesystem resolution
    source_path: Optional[str]
    source_kind: Optional[str]      # SourceKind value
    directory: Optional[str]        # final codebase directory

    # Result
    project_space: Optional[str]
    codebase: Optional[Codebase]

    # Per-node bookkeeping
    events: Optional[List[Dict[str, Any]]]
