"""Unit tests for core models, catalog and settings."""

import pytest

from config.settings import Settings
from vault_allocator.core.catalog import DEFAULT_VAULT_CATALOG, default_catalog
from vault_allocator.core.models import AllocationPlan, RiskTier
from vault_allocator.engine.planner import AllocationPlanner

from tests.factories import make_vault


class TestVault:
    """Tests for Vault helpers."""

    def test_matches_name_and_symbol(self):
        vault = make_vault("Steakhouse USDC", 8.0, RiskTier.LOW, symbol="steakUSDC")

        assert vault.matches("steak")
        assert vault.matches("HOUSE")
        assert not vault.matches("gauntlet")
        assert not vault.matches("   ")

    def test_is_depositable(self, depositable_vault, scenario_vaults):
        assert depositable_vault.is_depositable
        assert not scenario_vaults[0].is_depositable

    def test_hashable_with_list_fields(self, depositable_vault):
        vault = make_vault("A", 1.0, RiskTier.LOW, warnings=["short_timelock"], curators=["Gauntlet"])
        twin = make_vault("A", 1.0, RiskTier.LOW, warnings=["short_timelock"], curators=["Gauntlet"])

        assert hash(vault) == hash(twin)
        assert len({vault, twin, depositable_vault}) == 2


class TestAllocationPlan:
    """Tests for AllocationPlan totals."""

    def test_totals(self, scenario_vaults):
        records = AllocationPlanner().plan(scenario_vaults, 1000, 3)
        plan = AllocationPlan(total_amount=1000, records=records)

        assert len(plan) == 3
        assert plan.total_percentage == 100
        assert plan.total_allocated == pytest.approx(1000)
        assert plan.total_expected_yield == pytest.approx(106)
        assert plan.overall_apy == pytest.approx(10.6)
        assert not plan.is_overallocated

    def test_zero_total(self):
        assert AllocationPlan(total_amount=0).overall_apy == 0.0

    def test_to_dict(self, scenario_vaults):
        records = AllocationPlanner().plan(scenario_vaults, 1000, 1)
        data = AllocationPlan(total_amount=1000, records=records).to_dict()

        assert data["records"][0]["name"] == "A"
        assert data["records"][0]["risk"] == "High"
        assert data["total_percentage"] == 50


class TestCatalog:
    """Tests for the built-in catalog."""

    def test_catalog_size(self):
        assert len(DEFAULT_VAULT_CATALOG) == 11

    def test_copy_is_independent(self):
        catalog = default_catalog()
        catalog.clear()
        assert len(default_catalog()) == 11

    def test_every_tier_present(self):
        tiers = {v.risk for v in DEFAULT_VAULT_CATALOG}
        assert tiers == {RiskTier.LOW, RiskTier.MEDIUM, RiskTier.HIGH}

    def test_spark_protocol(self):
        spark = next(v for v in DEFAULT_VAULT_CATALOG if v.symbol == "sparkUSDC")
        assert spark.protocol == "Spark.fi"


class TestSettings:
    """Tests for Settings parsing."""

    def test_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        settings = Settings()

        assert settings.chain_id == 8453
        assert settings.default_num_vaults == 3
        assert settings.normalize_percentages is False
        assert settings.vault_asset_address is None

    def test_environment_overrides(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("USE_STATIC_CATALOG", "true")
        monkeypatch.setenv("VAULT_ASSET_ADDRESS", "  ")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings()

        assert settings.use_static_catalog is True
        assert settings.vault_asset_address is None
        assert settings.log_level == "DEBUG"

    def test_ensure_cache_dir(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        settings = Settings(cache_dir=str(tmp_path / "c"))

        path = settings.ensure_cache_dir()

        assert path.is_dir()
