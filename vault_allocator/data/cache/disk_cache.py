"""SQLite-based disk cache with TTL support."""

import hashlib
import logging
from typing import Any, Dict, List, Optional, TypeVar

import diskcache

from config.settings import Settings, get_settings
from vault_allocator.core.models import RiskTier, UnderlyingAsset, Vault

logger = logging.getLogger(__name__)

T = TypeVar("T")


def vault_to_dict(vault: Vault) -> Dict[str, Any]:
    """Plain-data form of a vault for caching."""
    asset = vault.underlying_asset
    return {
        "name": vault.name,
        "symbol": vault.symbol,
        "apy": vault.apy,
        "protocol": vault.protocol,
        "risk": vault.risk.value,
        "address": vault.address,
        "underlying_asset": {
            "address": asset.address,
            "symbol": asset.symbol,
            "name": asset.name,
            "decimals": asset.decimals,
        } if asset else None,
        "description": vault.description,
        "total_assets_usd": vault.total_assets_usd,
        "risk_score": vault.risk_score,
        "warnings": list(vault.warnings),
        "curators": list(vault.curators),
    }


def vault_from_dict(data: Dict[str, Any]) -> Vault:
    """Rebuild a vault from ``vault_to_dict`` output."""
    asset = data.get("underlying_asset")
    return Vault(
        name=data["name"],
        symbol=data["symbol"],
        apy=float(data["apy"]),
        protocol=data["protocol"],
        risk=RiskTier(data["risk"]),
        address=data.get("address"),
        underlying_asset=UnderlyingAsset(**asset) if asset else None,
        description=data.get("description", ""),
        total_assets_usd=data.get("total_assets_usd"),
        risk_score=data.get("risk_score"),
        warnings=list(data.get("warnings") or []),
        curators=list(data.get("curators") or []),
    )


class DiskCache:
    """
    SQLite-based disk cache with TTL support.

    Uses diskcache for efficient persistent caching with automatic expiration.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        namespace: str = "vaults",
    ):
        self.settings = settings or get_settings()
        self.namespace = namespace
        self._cache: Optional[diskcache.Cache] = None

    def _get_cache(self) -> diskcache.Cache:
        """Get or create the cache instance."""
        if self._cache is None:
            cache_dir = self.settings.ensure_cache_dir() / self.namespace
            cache_dir.mkdir(parents=True, exist_ok=True)
            self._cache = diskcache.Cache(str(cache_dir))
        return self._cache

    @staticmethod
    def make_key(*parts: Any) -> str:
        """Create a cache key from parts, hashing long keys."""
        key = ":".join(str(p) for p in parts)
        if len(key) > 200:
            return hashlib.sha256(key.encode()).hexdigest()
        return key

    def get(
        self,
        key: str,
        default: Optional[T] = None,
    ) -> Optional[T]:
        """
        Get a value from the cache.

        Args:
            key: Cache key
            default: Default value if not found or expired

        Returns:
            Cached value or default
        """
        try:
            cache = self._get_cache()
            return cache.get(key, default=default)
        except Exception as e:
            logger.warning(f"Cache get error for key {key}: {e}")
            return default

    def set(
        self,
        key: str,
        value: Any,
        ttl: Optional[int] = None,
    ) -> bool:
        """
        Set a value in the cache.

        Args:
            key: Cache key
            value: Value to cache
            ttl: Time-to-live in seconds (None = use default)

        Returns:
            True if successful
        """
        if ttl is None:
            ttl = self.settings.cache_ttl_seconds

        try:
            cache = self._get_cache()
            cache.set(key, value, expire=ttl)
            return True
        except Exception as e:
            logger.warning(f"Cache set error for key {key}: {e}")
            return False

    def delete(self, key: str) -> bool:
        """Delete a value; True if the key existed."""
        try:
            cache = self._get_cache()
            return cache.delete(key)
        except Exception as e:
            logger.warning(f"Cache delete error for key {key}: {e}")
            return False

    def clear(self) -> int:
        """
        Clear all values from the cache.

        Returns:
            Number of items cleared
        """
        try:
            cache = self._get_cache()
            count = len(cache)
            cache.clear()
            return count
        except Exception as e:
            logger.warning(f"Cache clear error: {e}")
            return 0

    def get_vaults(self, key: str) -> Optional[List[Vault]]:
        """Cached vault list, or None on a miss or unreadable entry."""
        raw = self.get(key)
        if raw is None:
            return None
        try:
            return [vault_from_dict(item) for item in raw]
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Discarding unreadable cache entry {key}: {e}")
            self.delete(key)
            return None

    def set_vaults(self, key: str, vaults: List[Vault], ttl: Optional[int] = None) -> bool:
        """Cache a vault list as plain data."""
        return self.set(key, [vault_to_dict(v) for v in vaults], ttl)

    def close(self):
        """Close the cache connection."""
        if self._cache:
            self._cache.close()
            self._cache = None


class CacheKeys:
    """Standard cache key patterns."""

    @staticmethod
    def vaults(source_name: str, chain_id: int, asset_address: Optional[str] = None) -> str:
        asset = (asset_address or "all").lower()
        return DiskCache.make_key("vaults", source_name, chain_id, asset)
