"""Exception hierarchy for dumpvalue.

All exceptions inherit from :class:`DumpValueError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`dumpvalue.exit_codes`.
The top-level error handler in :func:`dumpvalue.app.main` catches
``DumpValueError`` and exits with the appropriate code, while unexpected
exceptions produce a crash log and exit with :data:`EXIT_GENERIC_FAILURE`.

Library code raises these errors and never logs or swallows them; reporting
is left to the caller (the CLI, or a build server marking a step as failed).

Subclass hierarchy::

    DumpValueError (exit 1)
    +-- InvalidUsageError   (exit 2)
    +-- ConfigError         (exit 3)
    +-- ExportError         (exit 4)
"""

from __future__ import annotations

import enum
from typing import Optional

from dumpvalue.exit_codes import (
    EXIT_CONFIG_ERROR,
    EXIT_EXPORT_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
)


class ConfigErrorKind(str, enum.Enum):
    """Categories of configuration failure carried by :class:`ConfigError`."""

    MISSING_ATTRIBUTE = "missing_attribute"
    MISSING_ELEMENT = "missing_element"
    INVALID_VALUE = "invalid_value"
    INVALID_DOCUMENT = "invalid_document"
    NOT_FOUND = "not_found"


class ExportErrorKind(str, enum.Enum):
    """Categories of export failure carried by :class:`ExportError`."""

    IO_FAILURE = "io_failure"
    ENCODING_FAILURE = "encoding_failure"
    INVALID_DOCUMENT = "invalid_document"


class DumpValueError(Exception):
    """Base exception for all dumpvalue errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`dumpvalue.exit_codes`. The entry point catches
    this exception type and calls ``sys.exit(exc.exit_code)``.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(DumpValueError):
    """Raised for invalid CLI arguments (e.g. a value pair without ``=``)."""

    exit_code = EXIT_INVALID_USAGE


class ConfigError(DumpValueError):
    """Raised for configuration problems.

    Args:
        message: Human-readable error description.
        kind: What went wrong, see :class:`ConfigErrorKind`.
        element: Tag of the offending configuration element, if known.
        attribute: Name of the missing or invalid property, if any.
    """

    exit_code = EXIT_CONFIG_ERROR

    def __init__(
        self,
        message: str,
        kind: ConfigErrorKind = ConfigErrorKind.INVALID_DOCUMENT,
        element: Optional[str] = None,
        attribute: Optional[str] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.element = element
        self.attribute = attribute


class ExportError(DumpValueError):
    """Raised when a value document cannot be encoded, persisted, or read.

    Args:
        message: Human-readable error description.
        kind: What went wrong, see :class:`ExportErrorKind`.
        path: The destination (or source) path involved, if any.
    """

    exit_code = EXIT_EXPORT_ERROR

    def __init__(
        self,
        message: str,
        kind: ExportErrorKind = ExportErrorKind.IO_FAILURE,
        path: Optional[str] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.path = path
