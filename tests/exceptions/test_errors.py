"""Tests for the exception hierarchy and error classification."""

import pytest

from lintcache.exceptions import (
    BadRequestError,
    ConfigurationError,
    CorruptionError,
    ErrorKind,
    LintCacheError,
    LintError,
    NotFoundError,
    PersistenceError,
    RemoteError,
    classify,
)


class TestClassify:
    @pytest.mark.parametrize(
        "exc,kind",
        [
            (BadRequestError("x"), ErrorKind.BAD_REQUEST),
            (NotFoundError("x"), ErrorKind.NOT_FOUND),
            (RemoteError("github.com", "HTTP 502"), ErrorKind.REMOTE),
            (CorruptionError("k", "bad json"), ErrorKind.CORRUPTION),
            (PersistenceError("put", "disk full"), ErrorKind.INTERNAL),
            (ConfigurationError("bad"), ErrorKind.INTERNAL),
            (RuntimeError("boom"), ErrorKind.INTERNAL),
            (KeyError("k"), ErrorKind.INTERNAL),
        ],
    )
    def test_kinds(self, exc, kind):
        assert classify(exc) is kind


class TestMessages:
    def test_details_are_appended(self):
        err = LintCacheError("Something failed", details={"path": "a/b"})
        assert str(err) == "Something failed (path=a/b)"

    def test_no_details(self):
        assert str(LintCacheError("plain")) == "plain"

    def test_remote_error_keeps_host(self):
        err = RemoteError("github.com", "timeout")
        assert err.host == "github.com"
        assert err.reason == "timeout"
        assert "github.com" in str(err)

    def test_lint_error_is_just_the_message(self):
        err = LintError("a.py", "a.py:3:1: invalid syntax")
        assert str(err) == "a.py:3:1: invalid syntax"
        assert err.filename == "a.py"

    def test_all_share_base(self):
        for exc in (BadRequestError("x"), NotFoundError("x"), CorruptionError("k", "r")):
            assert isinstance(exc, LintCacheError)
