"""Collaborator contracts for the group member extractor.

The extractor never talks to storage, parsing or reference handling
directly; it depends on these abstract classes and receives concrete
implementations at construction time.

Key distinction:
  - contracts.py: Abstract collaborator interfaces (this module)
  - stores/: ResourceStore implementations (memory, filesystem)
  - serialization.py: FHIR JSON ResourceDeserializer
  - references.py: FHIR literal ReferenceResolver

Implementations MUST remain stateless with respect to a single resolution
(no per-request mutable attributes) and safe to share between concurrent
resolutions.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from infrastructure.operations import CancellationToken
from modules.export.domain.models import (
    GroupResource,
    RawResource,
    ResolvedMember,
    ResourceKey,
)


class ResourceStore(ABC):
    """Key-based retrieval of raw resources."""

    @abstractmethod
    async def fetch(
        self, key: ResourceKey, cancellation: Optional[CancellationToken] = None
    ) -> Optional[RawResource]:
        """Return the stored record for key, or None when it does not exist."""
        raise NotImplementedError()


class ResourceDeserializer(ABC):
    """Turns a raw record into a structured group."""

    @abstractmethod
    def deserialize(self, raw: RawResource) -> GroupResource:
        """Return the group described by raw, preserving member order."""
        raise NotImplementedError()


class ReferenceResolver(ABC):
    """Turns a member reference string into a resource id and type."""

    @abstractmethod
    def resolve(self, reference: Optional[str]) -> ResolvedMember:
        """Return the referenced resource's id and type.

        Raises an implementation-defined error when the reference is
        malformed or cannot be resolved.
        """
        raise NotImplementedError()
