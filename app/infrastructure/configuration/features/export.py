"""Export feature settings."""

import json
from typing import Annotated, Any, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import NoDecode
import structlog

from infrastructure.configuration.base import FeatureSettings

logger = structlog.stdlib.get_logger().bind(component="config.export")


class ExportFeatureSettings(FeatureSettings):
    """Configuration for group export scope resolution.

    Environment Variables:
        EXPORT_REFERENCE_BASE_URLS: Server base URLs that absolute member
            references may point at. Accepts a JSON list or a comma-separated
            string. When empty, absolute references are accepted from any base.

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        resolver = FhirReferenceResolver(
            base_urls=settings.export.reference_base_urls
        )
        ```
    """

    reference_base_urls: Annotated[List[str], NoDecode] = Field(
        default_factory=list,
        alias="EXPORT_REFERENCE_BASE_URLS",
        description="Base URLs accepted for absolute member references",
    )

    @field_validator("reference_base_urls", mode="before")
    @classmethod
    def _parse_reference_base_urls(cls, v: Optional[Any]) -> Any:
        """Parse EXPORT_REFERENCE_BASE_URLS from a JSON list or CSV string."""
        if v is None:
            return []
        if isinstance(v, (list, tuple)):
            return list(v)
        if isinstance(v, str):
            s = v.strip()
            if not s:
                return []
            if s.startswith("["):
                try:
                    parsed = json.loads(s)
                except (json.JSONDecodeError, ValueError) as e:
                    raise ValueError(
                        f"Invalid EXPORT_REFERENCE_BASE_URLS JSON: {e} (value: {s[:80]}...)"
                    ) from e
                if not isinstance(parsed, list):
                    raise ValueError("EXPORT_REFERENCE_BASE_URLS must be a JSON list")
                return parsed
            return [part.strip() for part in s.split(",") if part.strip()]
        raise ValueError("EXPORT_REFERENCE_BASE_URLS must be a list or a string")

    @field_validator("reference_base_urls", mode="after")
    @classmethod
    def _normalize_reference_base_urls(cls, v: List[str]) -> List[str]:
        normalized = []
        for url in v:
            if not url.startswith(("http://", "https://")):
                raise ValueError(
                    f"EXPORT_REFERENCE_BASE_URLS entries must be http(s) URLs: {url}"
                )
            normalized.append(url.rstrip("/"))
        if not normalized:
            logger.debug("no_reference_base_urls_configured")
        return normalized

    def __init__(self, **kwargs):
        """Allow programmatic construction using the field name."""
        if (
            "reference_base_urls" in kwargs
            and "EXPORT_REFERENCE_BASE_URLS" not in kwargs
        ):
            kwargs["EXPORT_REFERENCE_BASE_URLS"] = kwargs.pop("reference_base_urls")
        super().__init__(**kwargs)
