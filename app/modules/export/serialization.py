"""FHIR JSON deserialization of Group resources.

Pydantic schemas validate the wire shape of a stored Group; the deserializer
converts the validated schema into the lightweight domain GroupResource the
extractor works with. Only the fields needed for export scope are modeled;
everything else in the document is ignored.
"""

import re
from datetime import datetime, timezone
from typing import Annotated, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from modules.export.contracts import ResourceDeserializer
from modules.export.domain.errors import ResourceDeserializationError
from modules.export.domain.models import GroupResource, MemberEntry, Period, RawResource

# Partial FHIR dateTime precisions: YYYY, YYYY-MM, YYYY-MM-DD
_PARTIAL_DATE_RE = re.compile(r"^(\d{4})(?:-(\d{2})(?:-(\d{2}))?)?$")


def parse_fhir_datetime(value: str) -> datetime:
    """Parse a FHIR dateTime into an aware datetime.

    Partial dates resolve to the first instant they denote. Values without
    an offset are read as UTC.
    """
    match = _PARTIAL_DATE_RE.match(value)
    if match:
        year, month, day = match.groups()
        return datetime(int(year), int(month or 1), int(day or 1), tzinfo=timezone.utc)

    if "T" not in value:
        raise ValueError(f"Invalid FHIR dateTime: {value!r}")
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class ReferenceSchema(BaseModel):
    """Schema for a FHIR Reference."""

    model_config = ConfigDict(extra="ignore")

    reference: Optional[str] = None
    type: Optional[str] = None
    display: Optional[str] = None


class PeriodSchema(BaseModel):
    """Schema for a FHIR Period."""

    model_config = ConfigDict(extra="ignore")

    start: Optional[datetime] = None
    end: Optional[datetime] = None

    @field_validator("start", "end", mode="before")
    @classmethod
    def _parse_datetime(cls, v):
        if isinstance(v, str):
            return parse_fhir_datetime(v)
        return v


class GroupMemberSchema(BaseModel):
    """Schema for one Group.member entry."""

    model_config = ConfigDict(extra="ignore")

    entity: ReferenceSchema
    inactive: Optional[bool] = None
    period: Optional[PeriodSchema] = None


class GroupSchema(BaseModel):
    """Schema for the parts of a FHIR Group used by export scope."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    resource_type: Annotated[Literal["Group"], Field(alias="resourceType")]
    id: Optional[str] = None
    name: Optional[str] = None
    member: List[GroupMemberSchema] = Field(default_factory=list)


def group_from_schema(schema: GroupSchema) -> GroupResource:
    """Convert a validated GroupSchema into a GroupResource."""
    members = []
    for m in schema.member:
        period = Period(start=m.period.start, end=m.period.end) if m.period else None
        members.append(
            MemberEntry(reference=m.entity.reference, inactive=m.inactive, period=period)
        )
    return GroupResource(id=schema.id, members=members, name=schema.name)


class FhirJsonDeserializer(ResourceDeserializer):
    """Deserializes FHIR JSON Group documents."""

    def deserialize(self, raw: RawResource) -> GroupResource:
        try:
            schema = GroupSchema.model_validate_json(raw.data)
        except ValidationError as e:
            raise ResourceDeserializationError(
                f"Could not deserialize {raw.key}: {e.error_count()} validation error(s): "
                f"{e.errors()[0]['msg']}",
                key=raw.key,
            ) from e
        return group_from_schema(schema)
