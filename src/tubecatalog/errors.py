"""Error handling utilities."""

from typing import Generic, Optional, TypeVar

from .logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def log_error(error: Exception, context: Optional[str] = None) -> None:
    """Log an error with optional context.

    Args:
        error: The exception to log
        context: Optional context about where/why the error occurred
    """
    if context:
        logger.error("%s: %s", context, str(error))
    else:
        logger.error(str(error))


def is_blank(text: Optional[str]) -> bool:
    """Return True if text is not a string, or is empty or whitespace only."""
    return not isinstance(text, str) or not text.strip()


class CatalogError(Exception):
    """Base class for catalog errors."""

    pass


class ValidationError(CatalogError, ValueError):
    """Error raised when a value fails validation."""

    pass


class GenreNotFoundError(CatalogError):
    """Error raised when a genre label does not match any genre."""

    def __init__(self, label: str):
        """Initialize error.

        Args:
            label: The label that could not be resolved
        """
        self.label = label
        super().__init__(f"Invalid genre found: {label!r}")


class RecordFormatError(CatalogError):
    """Error raised when a load-file record is malformed."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        """Initialize error.

        Args:
            message: Description of the problem
            line_number: 1-based line number where the problem was found
        """
        self.line_number = line_number
        if line_number is not None:
            super().__init__(f"Line {line_number}: {message}")
        else:
            super().__init__(message)


class Result(Generic[T]):
    """Either a success payload or the error that prevented it.

    Call sites decide how to surface a failure: ``unwrap()`` raises the
    stored error, while ``succeeded`` lets a caller reduce it to a flag.
    """

    def __init__(self, value: Optional[T] = None, error: Optional[CatalogError] = None):
        """Initialize result.

        Args:
            value: Success payload
            error: Failure, if any
        """
        self._value = value
        self._error = error

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        """Create a successful result.

        Args:
            value: Success payload

        Returns:
            Result carrying the payload
        """
        return cls(value=value)

    @classmethod
    def fail(cls, error: CatalogError) -> "Result[T]":
        """Create a failed result.

        Args:
            error: The error that prevented success

        Returns:
            Result carrying the error
        """
        return cls(error=error)

    @property
    def succeeded(self) -> bool:
        """True if the result carries no error."""
        return self._error is None

    @property
    def value(self) -> Optional[T]:
        """Success payload, or None for a failed result."""
        return self._value

    @property
    def error(self) -> Optional[CatalogError]:
        """Stored error, or None for a successful result."""
        return self._error

    def unwrap(self) -> T:
        """Return the payload or raise the stored error.

        Raises:
            CatalogError: The failure this result carries
        """
        if self._error is not None:
            raise self._error
        return self._value

    def __bool__(self) -> bool:
        return self.succeeded

    def __repr__(self) -> str:
        if self.succeeded:
            return f"Result.ok({self._value!r})"
        return f"Result.fail({self._error!r})"
