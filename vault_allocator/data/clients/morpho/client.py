"""Morpho GraphQL API client implementing the VaultSource interface."""

import logging
from typing import Any, Dict, List, Optional

from aiolimiter import AsyncLimiter
from gql import Client, gql
from gql.transport.aiohttp import AIOHTTPTransport

from config.settings import Settings, get_settings
from vault_allocator.core.models import Vault
from vault_allocator.data.clients.base import VaultSource
from vault_allocator.data.clients.morpho.parser import MorphoVaultParser
from vault_allocator.protocols.morpho.config import (
    MORPHO_API_RATE_LIMIT,
    MORPHO_API_RATE_WINDOW,
    MORPHO_VAULTS_PAGE_LIMIT,
)
from vault_allocator.protocols.morpho.queries import MorphoQueries

logger = logging.getLogger(__name__)


class MorphoVaultClient(VaultSource):
    """GraphQL client for Morpho Blue vault listings."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._rate_limiter = AsyncLimiter(
            MORPHO_API_RATE_LIMIT, MORPHO_API_RATE_WINDOW
        )
        self._chain_id = self.settings.chain_id
        self._asset_address = self.settings.vault_asset_address
        self._parser = MorphoVaultParser()

    @property
    def source_name(self) -> str:
        return "Morpho Blue"

    async def _execute(self, query: str, variables: Dict[str, Any]) -> Dict[str, Any]:
        """Execute a GraphQL query with rate limiting."""
        async with self._rate_limiter:
            transport = AIOHTTPTransport(url=self.settings.morpho_api_url)
            client = Client(transport=transport, fetch_schema_from_transport=False)
            async with client as session:
                result = await session.execute(gql(query), variable_values=variables)
                return result

    async def fetch_vaults(self, skip: int = 0) -> List[Vault]:
        """Fetch one page of vaults starting at ``skip``."""
        variables: Dict[str, Any] = {
            "first": MORPHO_VAULTS_PAGE_LIMIT,
            "skip": skip,
            "chainId": self._chain_id,
        }
        query = MorphoQueries.VAULTS_QUERY
        if self._asset_address:
            variables["assetAddress"] = self._asset_address
            query = MorphoQueries.ASSET_VAULTS_QUERY

        try:
            result = await self._execute(query, variables)
        except Exception as e:
            logger.error(f"Failed to fetch vaults (skip={skip}): {e}")
            raise

        vaults_block = result.get("vaults") if result else None
        if not vaults_block or vaults_block.get("items") is None:
            raise ValueError("Invalid GraphQL response structure: missing vaults.items")

        return self._parser.parse_vaults(vaults_block["items"])

    async def get_vaults(self) -> List[Vault]:
        """Fetch every page until the API returns an empty one."""
        all_vaults: List[Vault] = []
        skip = 0

        for _ in range(self.settings.morpho_max_pages):
            vaults = await self.fetch_vaults(skip)
            if not vaults:
                break
            all_vaults.extend(vaults)
            skip += MORPHO_VAULTS_PAGE_LIMIT
        else:
            logger.warning(
                f"Stopped after {self.settings.morpho_max_pages} pages; "
                f"{len(all_vaults)} vaults loaded"
            )

        logger.info(f"Loaded {len(all_vaults)} vaults from {self.source_name}")
        return all_vaults

    async def close(self) -> None:
        """Close the client connection (no-op as we create fresh connections)."""
        pass
