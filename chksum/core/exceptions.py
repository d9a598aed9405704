"""
Custom exception hierarchy for chksum.

Every error raised by the library derives from ChksumException so callers
can catch library failures without also catching unrelated errors.
"""

from __future__ import annotations


class ChksumException(Exception):
    """
    Base exception for all chksum errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (file paths, names, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
        recoverable: Whether retry/recovery may be possible
    """

    exit_code: int = 1
    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ChksumConfigError(ChksumException):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(ChksumConfigError):
    """
    A configuration file was found but could not be read.

    Raised for permission errors and paths that are directories. TOML
    syntax errors are not raised; they are recorded on the settings and
    the defaults apply.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigValidationError(ChksumConfigError, ValueError):
    """
    A configuration value from TOML or the environment failed validation.

    Inherits from ValueError so callers validating input can catch it generically.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Algorithm Errors
# =============================================================================


class ChecksumAlgorithmError(ChksumException):
    """Base class for hash algorithm errors."""

    pass


class UnsupportedAlgorithmError(ChecksumAlgorithmError, ValueError):
    """
    The requested hash algorithm is not known to the registry.

    Raised by registry lookups and by parsing a checksum whose prefix
    names an unknown algorithm.
    """

    recoverable: bool = False

    def __init__(
        self,
        algorithm: str,
        *,
        message: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        ctx["algorithm"] = algorithm
        self.algorithm = algorithm
        super().__init__(message or "Unsupported hash algorithm", context=ctx, cause=cause)


# =============================================================================
# I/O Errors
# =============================================================================


class ChecksumIOError(ChksumException):
    """
    Reading input data failed.

    Raised for missing files, permission errors, directories passed as
    files, etc. The underlying OSError is chained as the cause.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if path:
            ctx["path"] = path
        self.path = path
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Validation Errors
# =============================================================================


class ChksumValidationError(ChksumException, ValueError):
    """
    Base class for input validation errors.

    Inherits from ValueError so callers can catch it generically.
    """

    pass


class InvalidArgumentError(ChksumValidationError):
    """
    Invalid command-line argument or function parameter.

    Raised when a precondition on user input fails, such as requesting
    a digest prefix longer than the digest itself.
    """

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if argument:
            ctx["argument"] = argument
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)
