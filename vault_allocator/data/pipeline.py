"""Data pipeline orchestration for Vault Allocator.

Ties a vault source to the disk cache and exposes the listing, lookup and
planning operations the UI and other callers need.
"""

import logging
from typing import Iterable, List, Optional, Union

from config.settings import Settings, get_settings
from vault_allocator.core.catalog import default_catalog
from vault_allocator.core.models import (
    AllocationPlan,
    RiskPreference,
    RiskTier,
    Vault,
    VaultPage,
)
from vault_allocator.data.cache.disk_cache import CacheKeys, DiskCache
from vault_allocator.data.clients.base import StaticVaultSource, VaultSource
from vault_allocator.engine.pagination import paginate
from vault_allocator.engine.planner import AllocationPlanner
from vault_allocator.engine.risk import RiskClassifier
from vault_allocator.execution.investment import InvestmentRequest, build_investment_request

logger = logging.getLogger(__name__)


def build_default_source(settings: Settings) -> VaultSource:
    """Choose the vault source named by the settings."""
    if settings.use_static_catalog:
        return StaticVaultSource(default_catalog())

    # Import here so the static path does not need the GraphQL stack
    from vault_allocator.data.clients.morpho.client import MorphoVaultClient

    return MorphoVaultClient(settings)


class VaultPipeline:
    """Orchestrates vault fetching, filtering and allocation planning.

    Fetched vault lists are kept in memory for the life of the pipeline and
    on disk for ``cache_ttl_seconds``.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        source: Optional[VaultSource] = None,
        cache: Optional[DiskCache] = None,
        planner: Optional[AllocationPlanner] = None,
    ):
        """Initialize the pipeline.

        Args:
            settings: Application settings
            source: Vault source (if None, chosen from settings)
            cache: Optional disk cache instance
            planner: Optional planner (if None, built from settings)
        """
        self.settings = settings or get_settings()
        self.source = source or build_default_source(self.settings)
        self.cache = cache or DiskCache(self.settings)
        self.planner = planner or AllocationPlanner(
            normalize=self.settings.normalize_percentages
        )
        self._vaults_cache: Optional[List[Vault]] = None

    @property
    def _cache_key(self) -> str:
        return CacheKeys.vaults(
            self.source.source_name,
            self.settings.chain_id,
            self.settings.vault_asset_address,
        )

    # ========== VAULT METHODS ==========

    async def get_vaults(self, force_refresh: bool = False) -> List[Vault]:
        """Get all vaults from the source.

        Args:
            force_refresh: Skip caches and fetch fresh data

        Returns:
            List of Vault objects
        """
        if not force_refresh and self._vaults_cache is not None:
            logger.debug("Memory cache hit for vaults")
            return self._vaults_cache

        if not force_refresh:
            cached = self.cache.get_vaults(self._cache_key)
            if cached is not None:
                logger.debug(f"Disk cache hit for {self._cache_key}")
                self._vaults_cache = cached
                return cached

        logger.info(f"Fetching vaults from {self.source.source_name}")
        vaults = await self.source.get_vaults()
        self._vaults_cache = vaults
        self.cache.set_vaults(self._cache_key, vaults)
        return vaults

    async def get_vaults_by_risk(
        self,
        risk: RiskTier,
        force_refresh: bool = False,
    ) -> List[Vault]:
        """Vaults of one tier, highest APY first."""
        vaults = await self.get_vaults(force_refresh=force_refresh)
        filtered = [v for v in vaults if v.risk == risk]
        return sorted(filtered, key=lambda v: v.apy, reverse=True)

    async def get_vaults_page(
        self,
        risk: RiskTier,
        page: int = 1,
        page_size: Optional[int] = None,
    ) -> VaultPage:
        """One page of the tier listing."""
        if page_size is None:
            page_size = self.settings.vaults_page_size
        vaults = await self.get_vaults_by_risk(risk)
        return paginate(vaults, page, page_size)

    async def find_vault(
        self,
        query: str,
        risk: Optional[RiskTier] = None,
    ) -> Optional[Vault]:
        """First vault whose name or symbol contains ``query``.

        Args:
            query: Case-insensitive search text
            risk: Optional tier to search within

        Returns:
            Matching Vault or None
        """
        if risk is not None:
            vaults = await self.get_vaults_by_risk(risk)
        else:
            vaults = await self.get_vaults()
        return next((v for v in vaults if v.matches(query)), None)

    # ========== PLANNING ==========

    async def plan_allocation(
        self,
        total_amount: float,
        risk_preference: Union[RiskPreference, str, None] = RiskPreference.BALANCED,
        num_vaults: Optional[int] = None,
        depositable_only: bool = False,
    ) -> AllocationPlan:
        """Plan a split of ``total_amount`` over the preference's tier.

        Args:
            total_amount: Amount to allocate, must be positive
            risk_preference: Investor preference, mapped to a risk tier
            num_vaults: Vaults to select (default from settings)
            depositable_only: Drop vaults that cannot take a deposit

        Returns:
            AllocationPlan with records in selection order

        Raises:
            ValueError: If total_amount is not positive
        """
        if not total_amount > 0:
            raise ValueError(f"Amount must be greater than 0, got {total_amount}")

        if num_vaults is None:
            num_vaults = self.settings.default_num_vaults
        risk = RiskClassifier.for_preference(risk_preference)

        candidates = await self.get_vaults()
        if depositable_only:
            candidates = [v for v in candidates if v.is_depositable]

        records = self.planner.plan_for_risk(candidates, risk, total_amount, num_vaults)
        logger.info(
            f"Planned {len(records)} vaults for {total_amount} "
            f"({risk.value} risk, {len(candidates)} candidates)"
        )
        return AllocationPlan(total_amount=total_amount, records=records)

    def investment_request(
        self,
        plan: AllocationPlan,
        members: Iterable[str],
    ) -> InvestmentRequest:
        """Contract arguments for ``plan``, with the total scaled per settings."""
        return build_investment_request(
            plan,
            members,
            total_decimals=self.settings.investment_total_decimals,
        )

    # ========== LIFECYCLE ==========

    async def close(self) -> None:
        """Close source and cache."""
        try:
            await self.source.close()
        finally:
            self.cache.close()
