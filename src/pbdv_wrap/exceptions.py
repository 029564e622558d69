"""Custom exception hierarchy for pbdv-wrap.

All exceptions that cross layer boundaries must inherit from
:class:`PbdvWrapError`.  Raw ``OSError`` / ``subprocess`` failures
must NEVER propagate beyond the infrastructure layer — they must be
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
PbdvWrapError
├── ValidationError
│   ├── UsageError
│   ├── MissingParameterError
│   ├── InvalidPathError
│   ├── NoInputError
│   └── OddInputCountError
├── DirectoryCreationError
├── PbrunNotFoundError
└── ExternalToolError
"""

from __future__ import annotations


class PbdvWrapError(Exception):
    """Base exception for all pbdv-wrap errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Parameter validation --------------------------------------------------

class ValidationError(PbdvWrapError):
    """Raised when the command line does not describe a runnable job.

    The CLI attaches the usage line as :attr:`hint` when none is set.
    """


class UsageError(ValidationError):
    """Raised for a malformed command line (unknown option, missing value)."""


class MissingParameterError(ValidationError):
    """Raised when a required parameter is absent or empty."""

    def __init__(
        self,
        message: str,
        *,
        field: str,
        flag: str,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.field: str = field
        self.flag: str = flag


class InvalidPathError(ValidationError):
    """Raised when a supplied interval file does not exist."""


class NoInputError(ValidationError):
    """Raised when no FASTQ files are supplied."""


class OddInputCountError(ValidationError):
    """Raised when the FASTQ files cannot be split into read pairs."""


# --- Output layout ---------------------------------------------------------

class DirectoryCreationError(PbdvWrapError):
    """Raised when the output directory tree cannot be created."""


# --- External tool ---------------------------------------------------------

class PbrunNotFoundError(PbdvWrapError):
    """Raised when the Parabricks ``pbrun`` executable cannot be launched."""


class ExternalToolError(PbdvWrapError):
    """Raised when ``pbrun`` exits with a nonzero status.

    :attr:`returncode` is already normalised to a valid process exit
    status and is passed through unchanged by the CLI.
    """

    def __init__(
        self,
        message: str,
        *,
        returncode: int,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.returncode: int = returncode
