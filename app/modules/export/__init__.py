"""Group export scope module.

Resolves a Group into the Patients that were active members at a point in
time, expanding nested groups and skipping membership cycles.

Features:
- Time-bounded membership filtering (inactive flag and membership period)
- Depth-first expansion of nested groups with cycle detection
- Cooperative cancellation threaded through every fetch
- Pluggable store, deserializer and reference resolver contracts
"""

from modules.export.group_members import GroupMemberExtractor
from modules.export.membership import is_active_member
from modules.export.service import ExportScopeService, classify_export_error

__all__ = [
    "ExportScopeService",
    "GroupMemberExtractor",
    "classify_export_error",
    "is_active_member",
]
