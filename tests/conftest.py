"""Pytest configuration and fixtures."""

import pytest
from typing import List

from vault_allocator.core.models import RiskTier, Vault

from tests.factories import USDC_BASE, make_vault


@pytest.fixture
def scenario_vaults() -> List[Vault]:
    """A (12 High), B (10 Low), C (8 Medium)."""
    return [
        make_vault("A", 12.0, RiskTier.HIGH),
        make_vault("B", 10.0, RiskTier.LOW),
        make_vault("C", 8.0, RiskTier.MEDIUM),
    ]


@pytest.fixture
def mixed_vaults() -> List[Vault]:
    """Unsorted mix of tiers."""
    return [
        make_vault("Mid One", 9.0, RiskTier.MEDIUM),
        make_vault("Safe One", 4.0, RiskTier.LOW),
        make_vault("Wild One", 20.0, RiskTier.HIGH),
        make_vault("Mid Two", 11.0, RiskTier.MEDIUM),
        make_vault("Safe Two", 6.0, RiskTier.LOW),
        make_vault("Wild Two", 16.0, RiskTier.HIGH),
    ]


@pytest.fixture
def depositable_vault() -> Vault:
    """Vault with an address and deposit token."""
    return make_vault(
        "Steakhouse USDC",
        8.09,
        RiskTier.LOW,
        symbol="steakUSDC",
        address="0xbeeF010f9cb27031ad51e3333f9aF9C6B1228183",
        underlying_asset=USDC_BASE,
    )


@pytest.fixture
def mock_settings(tmp_path):
    """Create mock settings for testing."""
    from unittest.mock import MagicMock

    settings = MagicMock()
    settings.morpho_api_url = "https://blue-api.morpho.org/graphql"
    settings.chain_id = 8453
    settings.vault_asset_address = None
    settings.morpho_max_pages = 10
    settings.use_static_catalog = True
    settings.cache_dir = tmp_path / "cache"
    settings.cache_ttl_seconds = 300
    settings.default_num_vaults = 3
    settings.vaults_page_size = 10
    settings.normalize_percentages = False
    settings.investment_total_decimals = 18
    settings.ensure_cache_dir.return_value = settings.cache_dir

    return settings
