"""Resource storage infrastructure settings."""

from typing import Literal

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class StorageSettings(InfrastructureSettings):
    """Resource store configuration.

    Environment Variables:
        STORAGE_BACKEND: Backend type - 'memory' or 'filesystem' (default: memory)
        STORAGE_ROOT_PATH: Root directory of the filesystem backend, laid out
            as <root>/<ResourceType>/<id>.json (default: data/resources)

    Storage Backends:
        - memory: In-process dictionary (development, testing)
        - filesystem: One JSON document per resource on local disk

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        if settings.storage.backend == "filesystem":
            store = FileSystemResourceStore(settings.storage.root_path)
        ```
    """

    backend: Literal["memory", "filesystem"] = Field(
        default="memory",
        alias="STORAGE_BACKEND",
        description="Resource store backend: 'memory' or 'filesystem'",
    )
    root_path: str = Field(
        default="data/resources",
        alias="STORAGE_ROOT_PATH",
        description="Root directory for the filesystem backend",
    )
