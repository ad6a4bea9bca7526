"""File manager result types."""

from __future__ import annotations

import os
from typing import Literal

from pydantic import BaseModel, Field

FailureKind = Literal[
    "missing-capability",
    "not-found",
    "io-error",
    "permission-denied",
    "excluded",
]


def _kind_for(exc: OSError) -> FailureKind:
    if isinstance(exc, FileNotFoundError):
        return "not-found"
    if isinstance(exc, PermissionError):
        return "permission-denied"
    return "io-error"


class FileOpError(BaseModel):
    kind: FailureKind
    path: str
    message: str = ""


class FileOpResult(BaseModel):
    """Outcome of a single file operation.

    Truthiness mirrors ``success`` so callers can keep treating the result
    as a plain flag. ``error`` is the failure that decided the outcome;
    ``errors`` holds every failure recorded during a recursive traversal.
    """

    success: bool
    operation: str
    path: str
    error: FileOpError | None = None
    errors: list[FileOpError] = Field(default_factory=list)

    def __bool__(self) -> bool:
        return self.success

    @property
    def kind(self) -> FailureKind | None:
        return self.error.kind if self.error else None

    @classmethod
    def ok(cls, operation: str, path: str | os.PathLike[str]) -> FileOpResult:
        return cls(success=True, operation=operation, path=os.fspath(path))

    @classmethod
    def fail(
        cls,
        operation: str,
        path: str | os.PathLike[str],
        kind: FailureKind,
        message: str = "",
        *,
        failed_path: str | os.PathLike[str] | None = None,
    ) -> FileOpResult:
        """Build a failed result; ``failed_path`` names the offending entry when it differs from ``path``."""
        err = FileOpError(kind=kind, path=os.fspath(failed_path if failed_path is not None else path), message=message)
        return cls(success=False, operation=operation, path=os.fspath(path), error=err, errors=[err])

    @classmethod
    def from_os_error(
        cls,
        operation: str,
        path: str | os.PathLike[str],
        exc: OSError,
        *,
        failed_path: str | os.PathLike[str] | None = None,
    ) -> FileOpResult:
        if failed_path is None and isinstance(exc.filename, str):
            failed_path = exc.filename
        return cls.fail(operation, path, _kind_for(exc), str(exc), failed_path=failed_path)

    @classmethod
    def from_errors(cls, operation: str, path: str | os.PathLike[str], errors: list[FileOpError]) -> FileOpResult:
        """Collapse the failures of a best-effort traversal into one result."""
        if not errors:
            return cls.ok(operation, path)
        return cls(success=False, operation=operation, path=os.fspath(path), error=errors[0], errors=list(errors))


def os_error(path: str | os.PathLike[str], exc: OSError) -> FileOpError:
    """Describe an OSError raised while handling a single entry."""
    failed = exc.filename if isinstance(exc.filename, str) else os.fspath(path)
    return FileOpError(kind=_kind_for(exc), path=failed, message=str(exc))
