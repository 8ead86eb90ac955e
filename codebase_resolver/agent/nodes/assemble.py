from pathlib import Path

from ..state import ResolveState, PROJECT_SPACE_OPTION
from ...core.models import DEFAULT_PROJECT_SPACE, Codebase, CodebaseExpression, Term

CREATOR_TERM = "file"


def assemble(state: ResolveState) -> ResolveState:
    options = dict(state.get("options") or {})
    project_space = options[PROJECT_SPACE_OPTION] if PROJECT_SPACE_OPTION in options else DEFAULT_PROJECT_SPACE

    state["project_space"] = project_space
    state["codebase"] = Codebase(
        directory=Path(state["directory"]),
        project_space=project_space,
        expression=CodebaseExpression(Term(CREATOR_TERM, options)),
    )
    state.setdefault("events", []).append({"node": "assemble", "ok": True, "project_space": project_space})
    return state
