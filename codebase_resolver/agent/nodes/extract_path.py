from ..state import ResolveState, PATH_OPTION
from ...core.errors import CodebaseCreationError, CreationFailure


def extract_path(state: ResolveState) -> ResolveState:
    source = (state.get("options") or {}).get(PATH_OPTION)
    if not source or not source.strip():
        raise CodebaseCreationError(
            f"Please specify the mandatory '{PATH_OPTION}' option for the FileCodebaseCreator",
            reason=CreationFailure.MISSING_PATH,
        )
    state["source_path"] = source
    state.setdefault("events", []).append({"node": "extract_path", "ok": True, "path": source})
    return state
