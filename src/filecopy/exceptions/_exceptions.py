from __future__ import annotations

from enum import Enum


class TargetRejection(Enum):
    EMPTY = "target argument is empty"
    STATUS_FAILED = "target status could not be queried"
    NAME_TOO_LONG = "joined target path exceeds the path length limit"
    UNSUPPORTED_TYPE = "target is neither a directory nor a regular file"


class FileCopyError(Exception):
    """Base class for exceptions in this module."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class UsageError(FileCopyError):
    pass


class ConfigValidationError(FileCopyError):
    pass


class ResourceExhaustionError(FileCopyError):
    pass


class _ReportedOSError(FileCopyError):
    """An error carrying the OSError that caused it, rendered like err(3)."""

    def __init__(self, message: str, error: OSError | None = None) -> None:
        super().__init__(message)
        self.error = error

    def __str__(self) -> str:
        if self.error is None:
            return self.message
        reason = self.error.strerror or str(self.error)
        return f"{self.message}: {reason}"


class SourceNotRegularFileError(_ReportedOSError):
    def __init__(self, error: OSError | None = None) -> None:
        super().__init__("source is not a regular file", error)


class InvalidTargetError(FileCopyError):
    """The target argument could not be turned into a path to open.

    The message is the same for every rejection, the reason is kept
    for diagnostics.
    """

    def __init__(self, reason: TargetRejection) -> None:
        super().__init__("target path is invalid")
        self.reason = reason


class SameFileError(FileCopyError):
    def __init__(self) -> None:
        super().__init__("source and target are the same file")


class CopyIOError(_ReportedOSError):
    def __init__(
        self, operation: str, error: OSError | None = None, detail: str | None = None
    ) -> None:
        super().__init__(operation, error)
        self.operation = operation
        self.detail = detail

    def __str__(self) -> str:
        if self.error is None and self.detail:
            return f"{self.message}: {self.detail}"
        return super().__str__()
