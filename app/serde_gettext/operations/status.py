"""Operation status enumeration."""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Resolution is pure computation, so there is no transient class of
    failure: an error is final for the document that produced it.

    Attributes:
        SUCCESS: Operation completed successfully
        PERMANENT_ERROR: Non-retryable error (decode, format, nesting)
    """

    SUCCESS = "success"
    PERMANENT_ERROR = "permanent_error"
