"""ResourceStore implementations."""

from modules.export.stores.filesystem import FileSystemResourceStore
from modules.export.stores.memory import InMemoryResourceStore

__all__ = ["FileSystemResourceStore", "InMemoryResourceStore"]
