"""Filesystem resource store: one JSON document per resource.

Layout:
    <root>/<ResourceType>/<id>.json

Only the current version of each resource is kept. Keys whose type or id
fall outside the resource grammar are reported as absent, so a key can never
address a path outside the root.
"""

import asyncio
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from infrastructure.logging import get_module_logger
from infrastructure.operations import CancellationToken, raise_if_cancelled
from modules.export.contracts import ResourceStore
from modules.export.domain.models import RawResource, ResourceKey

logger = get_module_logger()

_RESOURCE_TYPE_RE = re.compile(r"^[A-Z][A-Za-z]+$")
_RESOURCE_ID_RE = re.compile(r"^[A-Za-z0-9\-\.]{1,64}$")


def _is_valid_key(key: ResourceKey) -> bool:
    return bool(
        _RESOURCE_TYPE_RE.match(key.resource_type)
        and _RESOURCE_ID_RE.match(key.resource_id)
        and key.resource_id not in (".", "..")
    )


class FileSystemResourceStore(ResourceStore):
    """Read-mostly store over a directory tree.

    Args:
        root_path: Directory containing one subdirectory per resource type.
    """

    def __init__(self, root_path: Union[str, Path]):
        self._root = Path(root_path)

    @property
    def root(self) -> Path:
        return self._root

    def path_for(self, resource_type: str, resource_id: str) -> Path:
        key = ResourceKey(resource_type, resource_id)
        if not _is_valid_key(key):
            raise ValueError(f"Invalid resource key: {key}")
        return self._root / resource_type / f"{resource_id}.json"

    def write(self, resource_type: str, resource_id: str, data: str) -> Path:
        """Write a resource document, creating the type directory if needed."""
        path = self.path_for(resource_type, resource_id)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(data, encoding="utf-8")
        return path

    def _read(self, key: ResourceKey) -> Optional[RawResource]:
        path = self._root / key.resource_type / f"{key.resource_id}.json"
        try:
            data = path.read_text(encoding="utf-8")
            modified = path.stat().st_mtime
        except FileNotFoundError:
            return None
        return RawResource(
            resource_type=key.resource_type,
            resource_id=key.resource_id,
            data=data,
            last_modified=datetime.fromtimestamp(modified, tz=timezone.utc),
        )

    async def fetch(
        self, key: ResourceKey, cancellation: Optional[CancellationToken] = None
    ) -> Optional[RawResource]:
        raise_if_cancelled(cancellation)
        if not _is_valid_key(key):
            logger.debug("invalid_resource_key", key=str(key))
            return None

        # Versioned reads are not supported; only the current document exists
        if key.version_id is not None:
            return None

        record = await asyncio.to_thread(self._read, key)
        raise_if_cancelled(cancellation)
        return record
