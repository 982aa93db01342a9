"""Unit tests for DiskCache."""

import pytest

from vault_allocator.core.catalog import default_catalog
from vault_allocator.data.cache.disk_cache import (
    CacheKeys,
    DiskCache,
    vault_from_dict,
    vault_to_dict,
)


class TestDiskCache:
    """Tests for DiskCache against a temporary directory."""

    @pytest.fixture
    def cache(self, mock_settings):
        cache = DiskCache(mock_settings)
        yield cache
        cache.close()

    def test_get_missing(self, cache):
        assert cache.get("missing") is None
        assert cache.get("missing", default=7) == 7

    def test_set_and_get(self, cache):
        assert cache.set("key", {"a": 1})
        assert cache.get("key") == {"a": 1}

    def test_delete(self, cache):
        cache.set("key", 1)
        assert cache.delete("key")
        assert cache.get("key") is None

    def test_clear(self, cache):
        cache.set("one", 1)
        cache.set("two", 2)
        assert cache.clear() == 2
        assert cache.get("one") is None

    def test_vaults_roundtrip(self, cache, depositable_vault):
        vaults = default_catalog()[:2] + [depositable_vault]

        cache.set_vaults("vaults:test", vaults)

        assert cache.get_vaults("vaults:test") == vaults

    def test_unreadable_vault_entry_is_dropped(self, cache):
        cache.set("vaults:bad", [{"name": "no symbol"}])

        assert cache.get_vaults("vaults:bad") is None
        assert cache.get("vaults:bad") is None

    def test_make_key_hashes_long_keys(self):
        key = DiskCache.make_key("x" * 300)
        assert len(key) == 64
        assert DiskCache.make_key("a", 1) == "a:1"


def test_vault_dict_keeps_risk_value(depositable_vault):
    data = vault_to_dict(depositable_vault)

    assert data["risk"] == "Low"
    assert data["underlying_asset"]["decimals"] == 6
    assert vault_from_dict(data) == depositable_vault


def test_cache_keys():
    assert CacheKeys.vaults("Morpho Blue", 8453) == "vaults:Morpho Blue:8453:all"
    assert CacheKeys.vaults("Morpho Blue", 1, "0xABC") == "vaults:Morpho Blue:1:0xabc"
