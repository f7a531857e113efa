"""Errors for the export module."""

from typing import Optional

from modules.export.domain.models import ResourceKey


class ExportScopeError(Exception):
    """Base class for errors raised while resolving export scope."""


class ResourceNotFoundError(ExportScopeError):
    """Raised when a resource required for resolution does not exist.

    Attributes:
        resource_type: Type of the missing resource
        resource_id: Identifier of the missing resource
    """

    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(f"{resource_type} {resource_id} was not found.")
        self.resource_type = resource_type
        self.resource_id = resource_id


class ResourceDeserializationError(ExportScopeError):
    """Raised by a deserializer when a stored record cannot be parsed.

    Attributes:
        key: Key of the record that failed to deserialize, when known
    """

    def __init__(self, message: str, key: Optional[ResourceKey] = None):
        super().__init__(message)
        self.key = key


class InvalidReferenceError(ExportScopeError):
    """Raised by a reference resolver for malformed or unresolvable references.

    Attributes:
        reference: The reference string that could not be resolved
    """

    def __init__(self, message: str, reference: Optional[str] = None):
        super().__init__(message)
        self.reference = reference
