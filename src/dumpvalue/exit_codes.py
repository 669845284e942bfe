"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~dumpvalue.exceptions.DumpValueError` subclass.
A build server invoking ``dumpvalue`` can inspect the exit code to mark
the step as failed without parsing stderr.

Example::

    $ dumpvalue write /missing/dir/out.xml Build=42
    $ echo $?
    4   # EXIT_EXPORT_ERROR -- the destination could not be written
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments or missing required parameters."""

EXIT_CONFIG_ERROR = 3
"""The configuration file is missing, malformed, or lacks a required property."""

EXIT_EXPORT_ERROR = 4
"""The value document could not be encoded, written, or read back."""
