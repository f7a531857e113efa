"""Error classifiers for infrastructure-level exceptions.

Converts exceptions raised below the domain layer (storage I/O, timeouts,
cancellation) into standardized OperationResult objects. Domain modules
classify their own exceptions first and fall back to classify_exception()
for everything else.

Usage:
    from infrastructure.operations.classifiers import classify_exception

    try:
        ids = await extractor.get_group_patient_ids(group_id, when)
    except ResourceNotFoundError as exc:
        return OperationResult.error(OperationStatus.NOT_FOUND, str(exc))
    except Exception as exc:
        return classify_exception(exc)
"""

import structlog

from infrastructure.operations.cancellation import OperationCancelledError
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

logger = structlog.get_logger(__name__)


def classify_exception(exc: Exception) -> OperationResult:
    """Classify a non-domain exception into an OperationResult.

    Mapping:
    - OperationCancelledError → CANCELLED
    - TimeoutError → TRANSIENT_ERROR (TIMEOUT)
    - OSError → TRANSIENT_ERROR (STORAGE_ERROR)
    - anything else → TRANSIENT_ERROR (UNKNOWN_ERROR), logged with traceback

    Args:
        exc: Exception raised while performing an operation

    Returns:
        OperationResult with appropriate status, message and error_code
    """
    if isinstance(exc, OperationCancelledError):
        return OperationResult.error(
            OperationStatus.CANCELLED,
            str(exc),
            error_code="CANCELLED",
        )

    # TimeoutError is a subclass of OSError, check it first
    if isinstance(exc, TimeoutError):
        return OperationResult.transient_error(
            f"Operation timed out: {exc}",
            error_code="TIMEOUT",
        )

    if isinstance(exc, OSError):
        return OperationResult.transient_error(
            f"Storage error: {type(exc).__name__}: {exc}",
            error_code="STORAGE_ERROR",
        )

    logger.error(
        "unclassified_operation_error",
        error_type=type(exc).__name__,
        error=str(exc),
        exc_info=exc,
    )
    return OperationResult.transient_error(
        f"Unexpected error: {type(exc).__name__}: {exc}",
        error_code="UNKNOWN_ERROR",
    )
