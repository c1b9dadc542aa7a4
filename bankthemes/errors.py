"""Error codes and error handling utilities for bankthemes."""

from __future__ import annotations

import errno
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any, Iterable


class ErrorCode(Enum):
    """Standardized error codes for theme build operations."""

    # File system errors
    FILE_ACCESS_DENIED = auto()
    FILE_READ_FAILED = auto()
    PATH_INVALID = auto()

    # Configuration errors
    CONFIG_INVALID = auto()
    CONFIG_MISSING = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.FILE_ACCESS_DENIED: "Access denied. Check permissions on the project tree.",
    ErrorCode.FILE_READ_FAILED: "A file or directory could not be read.",
    ErrorCode.PATH_INVALID: "The specified path is invalid or inaccessible.",

    ErrorCode.CONFIG_INVALID: "Build configuration is invalid.",
    ErrorCode.CONFIG_MISSING: "Build configuration file not found.",
}


@dataclass
class BuildError(Exception):
    """Base exception for bankthemes with error code and context."""

    code: ErrorCode
    message: str = ""
    path: Path | None = None
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")
        if not self.suggestion and self.code in ERROR_MESSAGES:
            self.suggestion = ERROR_MESSAGES[self.code]

    def __str__(self) -> str:
        parts = [self.message]
        if self.path:
            parts.append(f"\nPath: {self.path}")
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or machine-readable output."""
        return {
            "code": self.code.name,
            "message": self.message,
            "path": str(self.path) if self.path else None,
            "details": self.details,
            "suggestion": self.suggestion,
        }


class InvalidConfigurationError(BuildError):
    """Raised when the selected theme or a config document is not valid."""

    def __init__(
        self,
        message: str,
        *,
        valid_values: Iterable[str] = (),
        path: Path | None = None,
    ) -> None:
        self.valid_values: tuple[str, ...] = tuple(valid_values)
        details: dict[str, Any] = {}
        if self.valid_values:
            details["valid"] = ", ".join(self.valid_values)
        super().__init__(
            ErrorCode.CONFIG_INVALID,
            message=message,
            path=path,
            details=details,
        )


class FilesystemAccessError(BuildError):
    """Raised when a directory listing or file probe fails for a reason other than absence."""

    def __init__(
        self,
        code: ErrorCode,
        *,
        path: Path,
        operation: str,
        reason: str = "",
    ) -> None:
        self.operation = operation
        details: dict[str, Any] = {"operation": operation}
        if reason:
            details["reason"] = reason
        super().__init__(
            code,
            message=f"Cannot {operation} {path}",
            path=path,
            details=details,
        )


def classify_os_error(exc: OSError, path: Path, operation: str) -> FilesystemAccessError:
    """Classify an OSError raised while probing ``path`` into a FilesystemAccessError."""
    if isinstance(exc, PermissionError) or exc.errno in (errno.EACCES, errno.EPERM):
        code = ErrorCode.FILE_ACCESS_DENIED
    elif isinstance(exc, (NotADirectoryError, IsADirectoryError)):
        code = ErrorCode.PATH_INVALID
    else:
        code = ErrorCode.FILE_READ_FAILED
    reason = exc.strerror or str(exc)
    return FilesystemAccessError(code, path=path, operation=operation, reason=reason)


def format_error_for_user(error: BuildError | Exception) -> str:
    """Format an error for the build log with actionable suggestions."""
    if isinstance(error, BuildError):
        parts = [error.message]
        if error.path:
            parts.append(f"\n  path: {error.path}")
        for key, value in error.details.items():
            parts.append(f"\n  {key}: {value}")
        if error.suggestion and error.suggestion != error.message:
            parts.append(f"\nHint: {error.suggestion}")
        return "".join(parts)

    return f"{type(error).__name__}: {error}"
