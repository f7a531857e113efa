"""Unit tests for OperationResult and OperationStatus."""

import pytest
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus


@pytest.mark.unit
class TestOperationStatus:
    def test_operation_status_values(self):
        assert OperationStatus.SUCCESS.value == "success"
        assert OperationStatus.TRANSIENT_ERROR.value == "transient_error"
        assert OperationStatus.PERMANENT_ERROR.value == "permanent_error"
        assert OperationStatus.NOT_FOUND.value == "not_found"
        assert OperationStatus.CANCELLED.value == "cancelled"


@pytest.mark.unit
class TestOperationResultFactories:
    def test_success_factory_minimal(self):
        result = OperationResult.success()
        assert result.status == OperationStatus.SUCCESS
        assert result.is_success is True
        assert result.message == "ok"

    def test_success_factory_with_data(self):
        data = {"patient_ids": ["p1"]}
        result = OperationResult.success(data=data, message="Resolved")
        assert result.data == data
        assert result.message == "Resolved"

    def test_error_factory_with_error_code(self):
        result = OperationResult.error(
            OperationStatus.PERMANENT_ERROR, "Bad reference", error_code="INVALID_REFERENCE"
        )
        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "INVALID_REFERENCE"
        assert result.is_success is False

    def test_transient_error_factory(self):
        result = OperationResult.transient_error("Timeout", error_code="TIMEOUT")
        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.is_retryable is True

    def test_permanent_error_factory(self):
        result = OperationResult.permanent_error("Malformed", error_code="DESERIALIZATION_ERROR")
        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.is_retryable is False

    def test_not_found_factory(self):
        result = OperationResult.not_found("Group g1 was not found.")
        assert result.status == OperationStatus.NOT_FOUND
        assert result.error_code == "NOT_FOUND"
