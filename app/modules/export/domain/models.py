"""Normalized data models for group export scope resolution.

Lightweight dataclasses (not Pydantic) used internally by the extractor and
its collaborators. Wire-format parsing with validation lives in
serialization.py; these structures are what the extractor operates on once a
resource has been deserialized.

Relationships:
  - ResourceKey → addresses a RawResource in a ResourceStore
  - RawResource → ResourceDeserializer → GroupResource
  - MemberEntry.reference → ReferenceResolver → ResolvedMember
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Union


@dataclass(frozen=True)
class ResourceKey:
    """Address of a resource in a store.

    Attributes:
        resource_type: Resource type name (e.g., 'Group').
        resource_id: Identifier, unique within the resource type.
        version_id: Optional version; None means the current version.
    """

    resource_type: str
    resource_id: str
    version_id: Optional[str] = None

    def __str__(self) -> str:
        base = f"{self.resource_type}/{self.resource_id}"
        if self.version_id:
            return f"{base}/_history/{self.version_id}"
        return base


@dataclass
class RawResource:
    """A resource record as returned by a store, before deserialization.

    Attributes:
        resource_type: Resource type name.
        resource_id: Resource identifier.
        data: Serialized payload (JSON text or bytes).
        version_id: Store-assigned version, if the store tracks one.
        last_modified: Time the record was last written, if known.
    """

    resource_type: str
    resource_id: str
    data: Union[str, bytes]
    version_id: Optional[str] = None
    last_modified: Optional[datetime] = None

    @property
    def key(self) -> ResourceKey:
        return ResourceKey(self.resource_type, self.resource_id, self.version_id)


@dataclass(frozen=True)
class Period:
    """Membership window; either bound may be absent."""

    start: Optional[datetime] = None
    end: Optional[datetime] = None


@dataclass(frozen=True)
class MemberEntry:
    """One row of a group's member list.

    Attributes:
        reference: Literal reference to the member resource (type + id).
        inactive: Whether the member is flagged as no longer active.
        period: Optional window during which the membership applies.
    """

    reference: Optional[str]
    inactive: Optional[bool] = None
    period: Optional[Period] = None

    @property
    def period_start(self) -> Optional[datetime]:
        return self.period.start if self.period else None

    @property
    def period_end(self) -> Optional[datetime]:
        return self.period.end if self.period else None


@dataclass
class GroupResource:
    """A deserialized group with its ordered member list."""

    id: Optional[str]
    members: List[MemberEntry] = field(default_factory=list)
    name: Optional[str] = None


@dataclass(frozen=True)
class ResolvedMember:
    """A member reference resolved to its resource id and type."""

    resource_id: str
    resource_type: str

    def as_dict(self) -> dict:
        return {"resource_id": self.resource_id, "resource_type": self.resource_type}
