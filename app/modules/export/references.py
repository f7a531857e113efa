"""Resolution of FHIR literal references.

Supported forms:
    Patient/123
    Patient/123/_history/2
    https://fhir.example.org/r4/Patient/123
    https://fhir.example.org/r4/Patient/123/_history/2

Contained references (#id), conditional references (Patient?identifier=...)
and logical-only references (no reference string) cannot be resolved to a
stored resource and are rejected.
"""

import re
from typing import Iterable, Optional

from modules.export.contracts import ReferenceResolver
from modules.export.domain.errors import InvalidReferenceError
from modules.export.domain.models import ResolvedMember

_RELATIVE_REFERENCE_RE = re.compile(
    r"(?P<type>[A-Z][A-Za-z]+)/(?P<id>[A-Za-z0-9\-\.]{1,64})"
    r"(?:/_history/(?P<version>[A-Za-z0-9\-\.]{1,64}))?$"
)
_ABSOLUTE_PREFIX_RE = re.compile(r"^https?://", re.IGNORECASE)


class FhirReferenceResolver(ReferenceResolver):
    """Parses literal references into (id, type).

    Args:
        base_urls: Server base URLs absolute references must point at. When
            empty, absolute references are accepted from any server.
    """

    def __init__(self, base_urls: Optional[Iterable[str]] = None):
        self._base_urls = tuple(url.rstrip("/") for url in (base_urls or ()))

    @property
    def base_urls(self) -> tuple:
        return self._base_urls

    def resolve(self, reference: Optional[str]) -> ResolvedMember:
        if reference is None or not reference.strip():
            raise InvalidReferenceError(
                "Member reference is empty.", reference=reference
            )

        value = reference.strip()
        if value.startswith("#"):
            raise InvalidReferenceError(
                f"Contained reference '{value}' cannot be resolved.", reference=reference
            )
        if "?" in value:
            raise InvalidReferenceError(
                f"Conditional reference '{value}' cannot be resolved.",
                reference=reference,
            )

        if _ABSOLUTE_PREFIX_RE.match(value):
            value = self._strip_base_url(value, reference)

        match = _RELATIVE_REFERENCE_RE.fullmatch(value)
        if not match:
            raise InvalidReferenceError(
                f"Reference '{reference}' is not a valid resource reference.",
                reference=reference,
            )

        return ResolvedMember(resource_id=match.group("id"), resource_type=match.group("type"))

    def _strip_base_url(self, value: str, reference: str) -> str:
        if self._base_urls:
            for base in self._base_urls:
                if value.lower().startswith(base.lower() + "/"):
                    return value[len(base) + 1 :]
            raise InvalidReferenceError(
                f"Reference '{reference}' does not point at a known server.",
                reference=reference,
            )

        # Any server: the resource part is the trailing Type/id[/_history/vid]
        match = _RELATIVE_REFERENCE_RE.search(value)
        if not match or value[match.start() - 1] != "/":
            raise InvalidReferenceError(
                f"Reference '{reference}' is not a valid resource reference.",
                reference=reference,
            )
        return value[match.start() :]
