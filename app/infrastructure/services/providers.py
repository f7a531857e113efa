"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from modules.export.contracts import ResourceStore
from modules.export.group_members import GroupMemberExtractor
from modules.export.references import FhirReferenceResolver
from modules.export.serialization import FhirJsonDeserializer
from modules.export.service import ExportScopeService
from modules.export.stores import FileSystemResourceStore, InMemoryResourceStore


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    This is the single source of truth for settings across the application.
    The @lru_cache decorator ensures only ONE instance is created per process.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_resource_store() -> ResourceStore:
    """
    Get application-scoped resource store singleton.

    The backend is selected by settings.storage.backend.

    Returns:
        ResourceStore: InMemoryResourceStore or FileSystemResourceStore.
    """
    settings = get_settings()
    if settings.storage.backend == "filesystem":
        return FileSystemResourceStore(settings.storage.root_path)
    return InMemoryResourceStore()


@lru_cache
def get_group_member_extractor() -> GroupMemberExtractor:
    """
    Get application-scoped GroupMemberExtractor singleton.

    The extractor holds no per-call state, so one instance serves every
    resolution in the process.
    """
    settings = get_settings()
    return GroupMemberExtractor(
        resource_store=get_resource_store(),
        resource_deserializer=FhirJsonDeserializer(),
        reference_resolver=FhirReferenceResolver(
            base_urls=settings.export.reference_base_urls
        ),
    )


@lru_cache
def get_export_scope_service() -> ExportScopeService:
    """Get application-scoped ExportScopeService singleton."""
    return ExportScopeService(get_group_member_extractor())
