"""Structured error handling for pif2pass."""

import sys
from typing import Any, NoReturn

from pif2pass.models.error import ErrorCode, StructuredError


class Pif2PassError(Exception):
    """Base exception for pif2pass errors.

    Wraps a StructuredError for consistent error handling.
    """

    def __init__(
        self,
        code: str,
        message: str,
        remediation: str,
        retryable: bool = False,
        context: dict[str, Any] | None = None,
    ):
        self.error = StructuredError(
            code=code,
            message=message,
            remediation=remediation,
            retryable=retryable,
            context=context,
        )
        super().__init__(message)

    def to_structured(self) -> StructuredError:
        """Convert to StructuredError."""
        return self.error

    def to_structured_error(self) -> dict:
        """Convert to JSON-serializable dict for output."""
        return self.error.model_dump(mode="json", exclude_none=True)


class UnsupportedFormatError(Pif2PassError):
    """Input file does not have a supported export extension."""

    def __init__(self, path: str, supported: list[str]):
        super().__init__(
            code=ErrorCode.UNSUPPORTED_FORMAT,
            message="Unsupported file format.",
            remediation=f"Export the vault from 1Password as {', '.join(supported)}",
            retryable=False,
            context={"path": path, "supported": supported},
        )


class ParseError(Pif2PassError):
    """Parse error."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        code: str = ErrorCode.PARSE_ERROR,
        remediation: str = "Check the export file for corruption or unsupported format",
        context: dict[str, Any] | None = None,
    ):
        ctx = dict(context or {})
        if path:
            ctx["path"] = path
        super().__init__(
            code=code,
            message=message,
            remediation=remediation,
            retryable=False,
            context=ctx or None,
        )


class PifFormatError(ParseError):
    """Export text is not valid JSON once the record separators are repaired."""

    def __init__(self, message: str, line: int, column: int, path: str | None = None):
        super().__init__(
            message=f"Malformed 1PIF data: {message} (line {line}, column {column})",
            path=path,
            remediation="Export the vault again; the file may be truncated or hand-edited",
            context={"line": line, "column": column},
        )


class UrlParseError(ParseError):
    """A record URL cannot be parsed into a host name."""

    def __init__(self, url: str, reason: str):
        super().__init__(
            message=f"Cannot derive a title from URL {url!r}: {reason}",
            code=ErrorCode.URL_PARSE_ERROR,
            remediation="Fix or remove the URL on the item in 1Password and export again",
            context={"url": url},
        )


class StoreError(Pif2PassError):
    """The password store cannot be written."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(
            code=ErrorCode.STORE_ERROR,
            message=message,
            remediation="Check that the password store directory exists and is writable",
            retryable=True,
            context={"path": path} if path else None,
        )


def handle_error(error: Pif2PassError | Exception, exit_code: int = 1) -> NoReturn:
    """Report an error on stderr and exit.

    Args:
        error: The error to handle
        exit_code: Exit code to use
    """
    from pif2pass.core.logging import error as log_error

    if isinstance(error, Pif2PassError):
        structured = error.to_structured()
    else:
        structured = StructuredError(
            code=ErrorCode.INTERNAL_ERROR,
            message=str(error),
            remediation="This is an unexpected error. Please report it.",
            retryable=False,
            context={"type": type(error).__name__},
        )

    log_error(
        structured.message,
        code=structured.code,
        remediation=structured.remediation,
        **(structured.context or {}),
    )
    sys.exit(exit_code)
