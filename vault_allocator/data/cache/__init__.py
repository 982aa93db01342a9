"""Persistent caching for fetched vault data."""

from vault_allocator.data.cache.disk_cache import CacheKeys, DiskCache

__all__ = ["CacheKeys", "DiskCache"]
