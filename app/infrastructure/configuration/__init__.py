"""Infrastructure configuration module - public API.

This module provides centralized configuration management using Pydantic
BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    ExportFeatureSettings: Export scope settings class
    StorageSettings: Resource store settings class

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    backend = settings.storage.backend
    base_urls = settings.export.reference_base_urls
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.features.export import ExportFeatureSettings
from infrastructure.configuration.infrastructure.storage import StorageSettings

__all__ = ["Settings", "ExportFeatureSettings", "StorageSettings"]
