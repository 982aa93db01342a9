"""Pydantic settings for Vault Allocator configuration."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from vault_allocator.core.constants import (
    BASE_CHAIN_ID,
    DEFAULT_NUM_VAULTS,
    DEFAULT_PAGE_SIZE,
)
from vault_allocator.protocols.morpho.config import MORPHO_API_URL


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Morpho API
    morpho_api_url: str = Field(
        default=MORPHO_API_URL,
        description="Morpho GraphQL API URL",
    )
    chain_id: int = Field(default=BASE_CHAIN_ID, description="Chain to list vaults for (Base by default)")
    vault_asset_address: Optional[str] = Field(
        default=None, description="Only list vaults whose underlying asset has this address"
    )
    morpho_max_pages: int = Field(default=10, ge=1, le=100, description="Upper bound on vault pages fetched")

    # Vault supply
    use_static_catalog: bool = Field(default=False, description="Serve the built-in vault catalog instead of the API")

    # Cache Configuration
    cache_dir: Path = Field(default=Path(".cache/vault_allocator"), description="Cache directory path")
    cache_ttl_seconds: int = Field(default=300, ge=60, le=3600, description="Cache TTL in seconds")

    # Allocation
    default_num_vaults: int = Field(default=DEFAULT_NUM_VAULTS, ge=1, le=20, description="Vaults selected per plan")
    vaults_page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=100, description="Vaults per page in listings")
    normalize_percentages: bool = Field(
        default=False, description="Rescale the 50/30/20 schedule so weights sum to 100"
    )
    investment_total_decimals: int = Field(
        default=18, ge=0, le=36, description="Decimals used for the plan total in investment requests"
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Root log level for the UI")

    @field_validator("cache_dir", mode="before")
    @classmethod
    def parse_cache_dir(cls, v):
        """Convert string to Path."""
        if isinstance(v, str):
            return Path(v)
        return v

    @field_validator("vault_asset_address", mode="before")
    @classmethod
    def parse_asset_address(cls, v):
        """Treat a blank address as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, v):
        """Normalise log level names."""
        if isinstance(v, str):
            return v.strip().upper() or "WARNING"
        return v

    def ensure_cache_dir(self) -> Path:
        """Ensure cache directory exists and return it."""
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        return self.cache_dir


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
