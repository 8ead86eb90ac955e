from __future__ import annotations

from pathlib import Path

import pytest

from codebase_resolver.core.errors import CodebaseCreationError, CreationFailure
from codebase_resolver.core.models import Codebase, CodebaseExpression, ProjectSpaceLookup, Term
from codebase_resolver.creators.base import check_keys


def test_term_renders_sorted_options():
    term = Term("file", {"projectspace": "internal", "path": "/a/b"})
    assert str(term) == 'file(path="/a/b",projectspace="internal")'
    assert str(Term("file")) == "file()"


def test_term_is_detached_from_caller_dict():
    opts = {"path": "/a"}
    term = Term("file", opts)
    opts["path"] = "/changed"
    assert term.options["path"] == "/a"
    with pytest.raises(TypeError):
        term.options["path"] = "/b"  # type: ignore[index]


def test_codebase_is_immutable(tmp_path: Path):
    cb = Codebase(tmp_path, "public", CodebaseExpression(Term("file", {"path": str(tmp_path)})))
    with pytest.raises(AttributeError):
        cb.project_space = "internal"  # type: ignore[misc]


def test_project_space_lookup():
    assert ProjectSpaceLookup.of("internal").unwrap() == "internal"
    missing = ProjectSpaceLookup.unsupported("nope")
    with pytest.raises(CodebaseCreationError) as ei:
        missing.unwrap()
    assert ei.value.reason is CreationFailure.UNSUPPORTED_OPERATION
    assert str(ei.value) == "nope"


def test_check_keys():
    check_keys({"path": "x"}, {"path", "projectspace"})
    check_keys({}, {"path"})
    with pytest.raises(CodebaseCreationError) as ei:
        check_keys({"path": "x", "zeta": "1", "alpha": "2"}, {"path"})
    assert ei.value.reason is CreationFailure.INVALID_OPTION
    assert "alpha, zeta" in str(ei.value)
