"""Tests for the operation result model."""

from __future__ import annotations

from sfm.types import FileOpError, FileOpResult, os_error


class TestFileOpResult:
    def test_ok_is_truthy(self) -> None:
        result = FileOpResult.ok("delete", "/tmp/x")
        assert result
        assert result.kind is None
        assert result.errors == []

    def test_fail_is_falsy_and_carries_path(self) -> None:
        result = FileOpResult.fail("zip", "/src", "not-found", "source does not exist")
        assert not result
        assert result.kind == "not-found"
        assert result.error == FileOpError(kind="not-found", path="/src", message="source does not exist")
        assert result.errors == [result.error]

    def test_os_error_kinds(self) -> None:
        assert FileOpResult.from_os_error("copy", "/a", FileNotFoundError(2, "gone")).kind == "not-found"
        assert FileOpResult.from_os_error("copy", "/a", PermissionError(13, "denied")).kind == "permission-denied"
        assert FileOpResult.from_os_error("copy", "/a", IsADirectoryError(21, "dir")).kind == "io-error"

    def test_os_error_prefers_failing_filename(self) -> None:
        exc = PermissionError(13, "denied", "/a/deep/file")
        result = FileOpResult.from_os_error("delete", "/a", exc)
        assert result.path == "/a"
        assert result.error is not None
        assert result.error.path == "/a/deep/file"
        assert os_error("/a", exc).path == "/a/deep/file"

    def test_from_errors_keeps_first_as_deciding_error(self) -> None:
        errors = [
            FileOpError(kind="permission-denied", path="/a/x"),
            FileOpError(kind="io-error", path="/a"),
        ]
        result = FileOpResult.from_errors("delete", "/a", errors)
        assert not result
        assert result.kind == "permission-denied"
        assert len(result.errors) == 2

    def test_from_errors_without_failures_is_success(self) -> None:
        assert FileOpResult.from_errors("copy", "/a", [])
