"""Errors raised while checking example coverage."""

from __future__ import annotations

from pathlib import Path


class ExcovError(Exception):
    """Base error. Carries the offending path and the underlying cause."""

    action = "process"

    def __init__(self, path: Path | str, cause: BaseException | None = None) -> None:
        self.path = Path(path)
        self.cause = cause
        message = f"Failed to {self.action} {self.path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class DirectoryReadError(ExcovError):
    """An examples or tests root is missing, not a directory, or unreadable."""

    action = "read directory"


class FileOpenError(ExcovError):
    """A selected test file could not be opened."""

    action = "open test file"


class FileScanError(ExcovError):
    """Reading a test file failed part way through."""

    action = "scan test file"
