"""
Application-scoped service providers.

Provides cached provider functions wiring settings into the export scope
service and its collaborators.
"""

from infrastructure.services.providers import (
    get_settings,
    get_resource_store,
    get_group_member_extractor,
    get_export_scope_service,
)

__all__ = [
    "get_settings",
    "get_resource_store",
    "get_group_member_extractor",
    "get_export_scope_service",
]
