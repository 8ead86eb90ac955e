from ..state import ResolveState, RECOGNIZED_OPTIONS
from ...creators.base import check_keys


def validate_options(state: ResolveState) -> ResolveState:
    options = state.get("options") or {}
    check_keys(options, RECOGNIZED_OPTIONS)
    state.setdefault("events", []).append({"node": "validate_options", "ok": True, "keys": sorted(options)})
    return state
