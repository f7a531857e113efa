"""Group member extraction for export scope.

Expands a Group into the individuals that were active members at a given
time. Nested groups are expanded depth-first; a group already expanded in
the same call is skipped, which is how membership cycles terminate. A
nested group that does not exist aborts the whole expansion.
"""

from datetime import datetime
from typing import Iterator, List, Optional, Set, Tuple

from infrastructure.logging import get_module_logger
from infrastructure.operations import CancellationToken, raise_if_cancelled
from modules.export.contracts import (
    ReferenceResolver,
    ResourceDeserializer,
    ResourceStore,
)
from modules.export.domain.errors import ResourceNotFoundError
from modules.export.domain.models import ResolvedMember, ResourceKey
from modules.export.domain.types import KnownResourceTypes
from modules.export.membership import ensure_utc, is_active_member

logger = get_module_logger()


class GroupMemberExtractor:
    """Gets member ids and types out of a group.

    Args:
        resource_store: Store the Group records are fetched from.
        resource_deserializer: Turns a fetched record into a GroupResource.
        reference_resolver: Turns a member reference into (id, type).
    """

    def __init__(
        self,
        resource_store: ResourceStore,
        resource_deserializer: ResourceDeserializer,
        reference_resolver: ReferenceResolver,
    ):
        for name, value in (
            ("resource_store", resource_store),
            ("resource_deserializer", resource_deserializer),
            ("reference_resolver", reference_resolver),
        ):
            if value is None:
                raise ValueError(f"{name} is required")

        self._resource_store = resource_store
        self._resource_deserializer = resource_deserializer
        self._reference_resolver = reference_resolver

    async def get_group_patient_ids(
        self,
        group_id: str,
        group_membership_time: datetime,
        cancellation: Optional[CancellationToken] = None,
        groups_already_checked: Optional[Set[str]] = None,
    ) -> Set[str]:
        """Return the ids of every Patient reachable from group_id.

        Only Patient members are collected. Nested Group members are expanded
        with the same membership time; members of any other type are ignored.

        Args:
            group_id: Id of the Group to expand.
            group_membership_time: Instant membership is evaluated at.
            cancellation: Optional token checked between members and before
                each fetch.
            groups_already_checked: Groups treated as already expanded. A new
                set is created when omitted. The set is updated in place with
                every group expanded by this call.

        Raises:
            ResourceNotFoundError: group_id or any nested group does not exist.
            OperationCancelledError: cancellation was requested mid-walk.
        """
        if groups_already_checked is None:
            groups_already_checked = set()

        groups_already_checked.add(group_id)
        patient_ids: Set[str] = set()

        # Each frame is a group being expanded and the members not yet visited
        stack: List[Tuple[str, Iterator[ResolvedMember]]] = [
            (
                group_id,
                iter(
                    await self.get_group_members(
                        group_id, group_membership_time, cancellation
                    )
                ),
            )
        ]

        while stack:
            current_group_id, pending = stack[-1]
            member = next(pending, None)
            if member is None:
                stack.pop()
                continue

            raise_if_cancelled(cancellation)

            if member.resource_type == KnownResourceTypes.PATIENT:
                patient_ids.add(member.resource_id)
            elif member.resource_type == KnownResourceTypes.GROUP:
                if member.resource_id in groups_already_checked:
                    logger.debug(
                        "group_cycle_skipped",
                        group_id=current_group_id,
                        nested_group_id=member.resource_id,
                    )
                    continue

                groups_already_checked.add(member.resource_id)
                nested_members = await self.get_group_members(
                    member.resource_id, group_membership_time, cancellation
                )
                stack.append((member.resource_id, iter(nested_members)))

        logger.info(
            "group_patient_ids_resolved",
            group_id=group_id,
            patient_count=len(patient_ids),
            groups_expanded=len(groups_already_checked),
        )
        return patient_ids

    async def get_group_members(
        self,
        group_id: str,
        group_membership_time: datetime,
        cancellation: Optional[CancellationToken] = None,
        include_inactive_members: bool = False,
    ) -> List[ResolvedMember]:
        """Return the direct members of a group active at the given time.

        Members are returned in the order the group lists them, without
        deduplication.

        Args:
            group_id: Id of the Group to read.
            group_membership_time: Instant membership is evaluated at.
            cancellation: Optional token checked before the fetch and between
                members.
            include_inactive_members: Also return members flagged inactive or
                whose period has ended.

        Raises:
            ResourceNotFoundError: The group does not exist.
        """
        raise_if_cancelled(cancellation)

        key = ResourceKey(KnownResourceTypes.GROUP, group_id)
        group_resource = await self._resource_store.fetch(key, cancellation)

        if group_resource is None:
            logger.warning("group_not_found", group_id=group_id)
            raise ResourceNotFoundError(KnownResourceTypes.GROUP, group_id)

        try:
            group = self._resource_deserializer.deserialize(group_resource)
        except Exception as e:
            logger.warning(
                "group_deserialization_failed",
                group_id=group_id,
                version_id=group_resource.version_id,
                error=str(e),
            )
            raise

        membership_time = ensure_utc(group_membership_time)
        members: List[ResolvedMember] = []

        for member in group.members:
            raise_if_cancelled(cancellation)

            if not is_active_member(member, membership_time, include_inactive_members):
                continue

            try:
                members.append(self._reference_resolver.resolve(member.reference))
            except Exception as e:
                logger.warning(
                    "group_member_reference_unresolved",
                    group_id=group_id,
                    reference=member.reference,
                    error=str(e),
                )
                raise

        logger.debug(
            "group_members_resolved",
            group_id=group_id,
            member_count=len(members),
            listed_count=len(group.members),
            include_inactive_members=include_inactive_members,
        )
        return members
