"""Operation status enumeration.

Status codes for operation results, used to classify outcomes of operations
across the application for appropriate error handling and retries.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSIENT_ERROR: Retryable error (storage I/O, timeout)
        PERMANENT_ERROR: Non-retryable error (malformed resource or reference)
        NOT_FOUND: Resource not found
        CANCELLED: Caller cancelled the operation before it completed
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    NOT_FOUND = "not_found"
    CANCELLED = "cancelled"
