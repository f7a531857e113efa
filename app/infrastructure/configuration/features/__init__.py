"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.export import ExportFeatureSettings

__all__ = [
    "ExportFeatureSettings",
]
