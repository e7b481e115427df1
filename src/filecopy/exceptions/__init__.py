from ._exceptions import (
    ConfigValidationError,
    CopyIOError,
    FileCopyError,
    InvalidTargetError,
    ResourceExhaustionError,
    SameFileError,
    SourceNotRegularFileError,
    TargetRejection,
    UsageError,
)

__all__ = [
    "ConfigValidationError",
    "CopyIOError",
    "FileCopyError",
    "InvalidTargetError",
    "ResourceExhaustionError",
    "SameFileError",
    "SourceNotRegularFileError",
    "TargetRejection",
    "UsageError",
]
