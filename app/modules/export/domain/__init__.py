"""Domain layer - data models, resource types, and errors."""

from modules.export.domain.errors import (
    ExportScopeError,
    InvalidReferenceError,
    ResourceDeserializationError,
    ResourceNotFoundError,
)
from modules.export.domain.models import (
    GroupResource,
    MemberEntry,
    Period,
    RawResource,
    ResolvedMember,
    ResourceKey,
)
from modules.export.domain.types import KnownResourceTypes

__all__ = [
    "ExportScopeError",
    "GroupResource",
    "InvalidReferenceError",
    "KnownResourceTypes",
    "MemberEntry",
    "Period",
    "RawResource",
    "ResolvedMember",
    "ResourceDeserializationError",
    "ResourceKey",
    "ResourceNotFoundError",
]
