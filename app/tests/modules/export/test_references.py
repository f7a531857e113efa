"""Tests for FhirReferenceResolver."""

import pytest

from modules.export.domain.errors import InvalidReferenceError
from modules.export.domain.models import ResolvedMember
from modules.export.references import FhirReferenceResolver


class TestRelativeReferences:
    @pytest.mark.parametrize(
        "reference,expected",
        [
            ("Patient/123", ResolvedMember("123", "Patient")),
            ("Group/g-1.a", ResolvedMember("g-1.a", "Group")),
            ("Patient/123/_history/4", ResolvedMember("123", "Patient")),
            ("  Practitioner/dr1  ", ResolvedMember("dr1", "Practitioner")),
        ],
    )
    def test_resolves(self, reference, expected):
        assert FhirReferenceResolver().resolve(reference) == expected

    @pytest.mark.parametrize(
        "reference",
        [
            None,
            "",
            "   ",
            "#contained-1",
            "Patient?identifier=http://hospital|123",
            "Patient",
            "Patient/",
            "patient/123",
            "Patient/123/extra",
            "Patient/has space",
            "Patient/" + "x" * 65,
        ],
    )
    def test_rejects(self, reference):
        with pytest.raises(InvalidReferenceError) as exc_info:
            FhirReferenceResolver().resolve(reference)

        assert exc_info.value.reference == reference


class TestAbsoluteReferences:
    def test_any_server_when_no_base_urls(self):
        resolver = FhirReferenceResolver()

        assert resolver.resolve("https://fhir.example.org/r4/Patient/p1") == ResolvedMember(
            "p1", "Patient"
        )
        assert resolver.resolve(
            "http://other.example.org/Group/g1/_history/2"
        ) == ResolvedMember("g1", "Group")

    def test_rejects_absolute_url_without_resource_part(self):
        with pytest.raises(InvalidReferenceError):
            FhirReferenceResolver().resolve("https://fhir.example.org/r4/")

    def test_rejects_type_glued_to_path_segment(self):
        with pytest.raises(InvalidReferenceError):
            FhirReferenceResolver().resolve("https://fhir.example.org/fooPatient/1")

    def test_configured_base_url_accepted(self):
        resolver = FhirReferenceResolver(base_urls=["https://fhir.example.org/r4/"])

        assert resolver.base_urls == ("https://fhir.example.org/r4",)
        assert resolver.resolve("https://fhir.example.org/r4/Patient/p1") == ResolvedMember(
            "p1", "Patient"
        )

    def test_base_url_match_is_case_insensitive(self):
        resolver = FhirReferenceResolver(base_urls=["https://FHIR.example.org/r4"])

        assert resolver.resolve("https://fhir.example.org/r4/Patient/p1").resource_id == "p1"

    def test_unknown_server_rejected(self):
        resolver = FhirReferenceResolver(base_urls=["https://fhir.example.org/r4"])

        with pytest.raises(InvalidReferenceError, match="known server"):
            resolver.resolve("https://elsewhere.example.org/r4/Patient/p1")

    def test_relative_reference_unaffected_by_base_urls(self):
        resolver = FhirReferenceResolver(base_urls=["https://fhir.example.org/r4"])

        assert resolver.resolve("Patient/p1") == ResolvedMember("p1", "Patient")
