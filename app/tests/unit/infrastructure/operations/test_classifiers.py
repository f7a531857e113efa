"""Unit tests for infrastructure error classifiers.

Tests cover:
- Cancellation mapping
- Timeout and storage I/O mapping
- Fallback for unknown exceptions
"""

import pytest

from infrastructure.operations.cancellation import OperationCancelledError
from infrastructure.operations.classifiers import classify_exception
from infrastructure.operations.status import OperationStatus


@pytest.mark.unit
class TestClassifyException:
    """Tests for classify_exception() function."""

    def test_cancelled(self):
        result = classify_exception(OperationCancelledError())

        assert result.status == OperationStatus.CANCELLED
        assert result.error_code == "CANCELLED"
        assert result.is_retryable is False

    def test_timeout_is_transient(self):
        result = classify_exception(TimeoutError("took too long"))

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "TIMEOUT"

    def test_os_error_is_transient_storage_error(self):
        result = classify_exception(PermissionError("denied"))

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "STORAGE_ERROR"
        assert "PermissionError" in result.message

    def test_unknown_error(self):
        result = classify_exception(RuntimeError("unexpected"))

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "UNKNOWN_ERROR"
        assert "unexpected" in result.message
