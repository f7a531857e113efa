"""Operation result types, status enums and cancellation.

This module contains standardized result types for operations across
the application, including status enums, result dataclasses, error
classifiers and cooperative cancellation tokens.
"""

from infrastructure.operations.cancellation import (
    CancellationToken,
    OperationCancelledError,
    raise_if_cancelled,
)
from infrastructure.operations.classifiers import classify_exception
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "CancellationToken",
    "OperationCancelledError",
    "OperationResult",
    "OperationStatus",
    "classify_exception",
    "raise_if_cancelled",
]
