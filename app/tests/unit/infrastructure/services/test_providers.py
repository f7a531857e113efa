"""Unit tests for application-scoped service providers."""

import pytest

from infrastructure.services import providers
from modules.export.group_members import GroupMemberExtractor
from modules.export.service import ExportScopeService
from modules.export.stores import FileSystemResourceStore, InMemoryResourceStore


@pytest.fixture(autouse=True)
def reset_provider_caches(monkeypatch):
    monkeypatch.delenv("STORAGE_BACKEND", raising=False)
    monkeypatch.delenv("STORAGE_ROOT_PATH", raising=False)
    monkeypatch.delenv("EXPORT_REFERENCE_BASE_URLS", raising=False)

    def _clear():
        for provider in (
            providers.get_settings,
            providers.get_resource_store,
            providers.get_group_member_extractor,
            providers.get_export_scope_service,
        ):
            provider.cache_clear()

    _clear()
    yield
    _clear()


@pytest.mark.unit
class TestProviders:
    def test_get_settings_is_cached(self):
        assert providers.get_settings() is providers.get_settings()

    def test_memory_store_by_default(self):
        assert isinstance(providers.get_resource_store(), InMemoryResourceStore)

    def test_filesystem_store_from_settings(self, monkeypatch, tmp_path):
        monkeypatch.setenv("STORAGE_BACKEND", "filesystem")
        monkeypatch.setenv("STORAGE_ROOT_PATH", str(tmp_path))

        store = providers.get_resource_store()

        assert isinstance(store, FileSystemResourceStore)
        assert store.root == tmp_path

    def test_extractor_and_service_wiring(self):
        extractor = providers.get_group_member_extractor()
        service = providers.get_export_scope_service()

        assert isinstance(extractor, GroupMemberExtractor)
        assert isinstance(service, ExportScopeService)
        assert providers.get_export_scope_service() is service
