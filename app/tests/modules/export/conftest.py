"""Shared fixtures for export module tests."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import pytest

from modules.export.group_members import GroupMemberExtractor
from modules.export.references import FhirReferenceResolver
from modules.export.serialization import FhirJsonDeserializer
from modules.export.stores import InMemoryResourceStore

MEMBERSHIP_TIME = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def membership_time() -> datetime:
    return MEMBERSHIP_TIME


@pytest.fixture
def member_factory():
    """Factory for FHIR Group.member dicts.

    Usage:
        member = member_factory("Patient/p1", inactive=True, end="2024-01-01T00:00:00Z")
    """

    def _factory(
        reference: str,
        inactive: Optional[bool] = None,
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> Dict[str, Any]:
        member: Dict[str, Any] = {"entity": {"reference": reference}}
        if inactive is not None:
            member["inactive"] = inactive
        if start is not None or end is not None:
            member["period"] = {}
            if start is not None:
                member["period"]["start"] = start
            if end is not None:
                member["period"]["end"] = end
        return member

    return _factory


@pytest.fixture
def store() -> InMemoryResourceStore:
    return InMemoryResourceStore()


@pytest.fixture
def add_group(store):
    """Store a FHIR Group with the given members.

    Plain strings are turned into active member references.

    Usage:
        add_group("g1", ["Patient/p1", member_factory("Group/g2", inactive=True)])
    """

    def _add(group_id: str, members: List[Any], name: Optional[str] = None):
        entries = [
            {"entity": {"reference": m}} if isinstance(m, str) else m for m in members
        ]
        document: Dict[str, Any] = {
            "resourceType": "Group",
            "id": group_id,
            "type": "person",
            "actual": True,
            "member": entries,
        }
        if name:
            document["name"] = name
        return store.upsert("Group", group_id, document)

    return _add


@pytest.fixture
def extractor(store) -> GroupMemberExtractor:
    return GroupMemberExtractor(
        resource_store=store,
        resource_deserializer=FhirJsonDeserializer(),
        reference_resolver=FhirReferenceResolver(),
    )
