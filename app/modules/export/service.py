"""Export scope service.

Entry point used by export orchestration. Wraps GroupMemberExtractor and
converts its exceptions into OperationResult values so callers can branch on
status instead of catching domain errors.

Usage:
    from infrastructure.services import get_export_scope_service

    service = get_export_scope_service()
    result = await service.resolve_export_scope("group-1")
    if result.is_success:
        patient_ids = result.data["patient_ids"]
"""

from datetime import datetime, timezone
from typing import Optional

from infrastructure.logging import bind_operation_context, get_module_logger
from infrastructure.operations import (
    CancellationToken,
    OperationResult,
    classify_exception,
)
from modules.export.domain.errors import (
    InvalidReferenceError,
    ResourceDeserializationError,
    ResourceNotFoundError,
)
from modules.export.group_members import GroupMemberExtractor

logger = get_module_logger()


def classify_export_error(exc: Exception) -> OperationResult:
    """Map an exception raised during resolution to an OperationResult."""
    if isinstance(exc, ResourceNotFoundError):
        return OperationResult.not_found(str(exc), error_code="GROUP_NOT_FOUND")
    if isinstance(exc, InvalidReferenceError):
        return OperationResult.permanent_error(str(exc), error_code="INVALID_REFERENCE")
    if isinstance(exc, ResourceDeserializationError):
        return OperationResult.permanent_error(
            str(exc), error_code="DESERIALIZATION_ERROR"
        )
    return classify_exception(exc)


class ExportScopeService:
    """Computes which individuals a group export covers."""

    def __init__(self, extractor: GroupMemberExtractor):
        self._extractor = extractor

    async def resolve_export_scope(
        self,
        group_id: str,
        membership_time: Optional[datetime] = None,
        cancellation: Optional[CancellationToken] = None,
    ) -> OperationResult:
        """Resolve the Patient ids a group export covers.

        Args:
            group_id: Group being exported.
            membership_time: Instant membership is evaluated at. Defaults to now.
            cancellation: Optional cancellation token.

        Returns:
            OperationResult whose data holds group_id, membership_time (ISO
            8601) and patient_ids (sorted) on success.
        """
        when = membership_time or datetime.now(timezone.utc)

        with bind_operation_context(group_id=group_id):
            logger.info("resolving_export_scope", membership_time=when.isoformat())
            try:
                patient_ids = await self._extractor.get_group_patient_ids(
                    group_id, when, cancellation
                )
            except Exception as exc:
                result = classify_export_error(exc)
                logger.warning(
                    "export_scope_resolution_failed",
                    status=result.status.value,
                    error_code=result.error_code,
                    error=result.message,
                )
                return result

            return OperationResult.success(
                data={
                    "group_id": group_id,
                    "membership_time": when.isoformat(),
                    "patient_ids": sorted(patient_ids),
                },
                message=f"Resolved {len(patient_ids)} patient(s)",
            )

    async def inspect_group_members(
        self,
        group_id: str,
        membership_time: Optional[datetime] = None,
        include_inactive: bool = False,
        cancellation: Optional[CancellationToken] = None,
    ) -> OperationResult:
        """List a group's direct members without expanding nested groups."""
        when = membership_time or datetime.now(timezone.utc)

        with bind_operation_context(group_id=group_id):
            try:
                members = await self._extractor.get_group_members(
                    group_id, when, cancellation, include_inactive_members=include_inactive
                )
            except Exception as exc:
                result = classify_export_error(exc)
                logger.warning(
                    "group_member_inspection_failed",
                    status=result.status.value,
                    error_code=result.error_code,
                    error=result.message,
                )
                return result

            return OperationResult.success(
                data={
                    "group_id": group_id,
                    "membership_time": when.isoformat(),
                    "members": [m.as_dict() for m in members],
                }
            )
