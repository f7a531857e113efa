"""In-memory resource store for development, tooling and tests."""

import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple, Union

from infrastructure.logging import get_module_logger
from infrastructure.operations import CancellationToken, raise_if_cancelled
from modules.export.contracts import ResourceStore
from modules.export.domain.models import RawResource, ResourceKey

logger = get_module_logger()


class InMemoryResourceStore(ResourceStore):
    """Dictionary-backed store keeping the latest version of each resource.

    Reads never mutate the store, so concurrent resolutions may share one
    instance.
    """

    def __init__(self) -> None:
        self._resources: Dict[Tuple[str, str], RawResource] = {}

    def upsert(
        self,
        resource_type: str,
        resource_id: str,
        data: Union[str, bytes, Dict[str, Any]],
        version_id: Optional[str] = None,
    ) -> RawResource:
        """Store a resource, replacing any previous version.

        Dict payloads are JSON-encoded. When version_id is omitted the
        previous version number is incremented, starting at "1".
        """
        if isinstance(data, dict):
            data = json.dumps(data)

        existing = self._resources.get((resource_type, resource_id))
        if version_id is None:
            previous = existing.version_id if existing else None
            version_id = str(int(previous) + 1) if previous and previous.isdigit() else "1"

        record = RawResource(
            resource_type=resource_type,
            resource_id=resource_id,
            data=data,
            version_id=version_id,
            last_modified=datetime.now(timezone.utc),
        )
        self._resources[(resource_type, resource_id)] = record
        logger.debug(
            "resource_upserted",
            resource_type=resource_type,
            resource_id=resource_id,
            version_id=version_id,
        )
        return record

    def delete(self, resource_type: str, resource_id: str) -> bool:
        """Remove a resource. Returns False if it was not stored."""
        return self._resources.pop((resource_type, resource_id), None) is not None

    def __len__(self) -> int:
        return len(self._resources)

    async def fetch(
        self, key: ResourceKey, cancellation: Optional[CancellationToken] = None
    ) -> Optional[RawResource]:
        raise_if_cancelled(cancellation)
        record = self._resources.get((key.resource_type, key.resource_id))
        if record is None:
            return None
        if key.version_id is not None and key.version_id != record.version_id:
            return None
        return record
