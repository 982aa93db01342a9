"""Morpho API response parser.

Converts raw Morpho GraphQL vault items into ``Vault`` records, checking
required fields at the boundary so the planner only sees typed data.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from vault_allocator.core.models import UnderlyingAsset, Vault
from vault_allocator.engine.risk import RiskClassifier
from vault_allocator.protocols.morpho.config import MORPHO_PROTOCOL_NAME

logger = logging.getLogger(__name__)

REQUIRED_VAULT_FIELDS = ("address", "name", "symbol")


class VaultParseError(ValueError):
    """Raised when an API vault item lacks required data."""


class MorphoVaultParser:
    """Parser for Morpho GraphQL vault items."""

    @staticmethod
    def parse_float(value: Any) -> float:
        """Safely parse a value to float; missing or malformed values are 0."""
        if value is None:
            return 0.0
        try:
            return float(value)
        except (TypeError, ValueError):
            return 0.0

    @staticmethod
    def parse_optional_float(value: Any) -> Optional[float]:
        """Parse a value to float, keeping None for missing data."""
        if value is None:
            return None
        try:
            return float(value)
        except (TypeError, ValueError):
            return None

    @classmethod
    def parse_apy(cls, state_data: Dict[str, Any]) -> float:
        """Net APY when reported, gross APY otherwise, as a percentage.

        The API reports yields as fractions (0.0523 = 5.23%).
        """
        net_apy = cls.parse_float(state_data.get("netApy"))
        apy = cls.parse_float(state_data.get("apy"))
        return (net_apy or apy) * 100

    @classmethod
    def parse_underlying_asset(cls, asset: Dict[str, Any]) -> Optional[UnderlyingAsset]:
        """Build the deposit token, or None when the item cannot support deposits."""
        if not asset or not asset.get("address") or asset.get("decimals") is None:
            return None
        try:
            decimals = int(asset["decimals"])
        except (TypeError, ValueError):
            return None
        return UnderlyingAsset(
            address=asset["address"],
            symbol=asset.get("symbol") or "???",
            name=asset.get("name") or asset.get("symbol") or "",
            decimals=decimals,
        )

    @classmethod
    def parse_vault(cls, data: Dict[str, Any]) -> Vault:
        """Parse vault data from API response.

        Raises:
            VaultParseError: If address, name or symbol is missing
        """
        missing = [f for f in REQUIRED_VAULT_FIELDS if not data.get(f)]
        if missing:
            raise VaultParseError(f"Vault item missing required fields: {', '.join(missing)}")

        state_data = data.get("state", {}) or {}
        risk_data = data.get("riskAnalysis") or {}
        metadata = data.get("metadata") or {}

        # riskAnalysis is a list on some API versions
        if isinstance(risk_data, list):
            risk_data = risk_data[0] if risk_data else {}

        apy = cls.parse_apy(state_data)
        risk_score = cls.parse_optional_float(risk_data.get("score"))

        warnings = [
            w.get("type", "")
            for w in data.get("warnings", []) or []
            if w and w.get("type")
        ]
        curators = [
            c.get("name", "")
            for c in metadata.get("curators", []) or []
            if c and c.get("name")
        ]

        return Vault(
            name=data["name"],
            symbol=data["symbol"],
            apy=apy,
            protocol=MORPHO_PROTOCOL_NAME,
            risk=RiskClassifier.resolve(risk_score, apy),
            address=data["address"],
            underlying_asset=cls.parse_underlying_asset(data.get("asset") or {}),
            description=metadata.get("description") or f"Morpho vault for {data['symbol']}",
            total_assets_usd=cls.parse_optional_float(state_data.get("totalAssetsUsd")),
            risk_score=risk_score,
            warnings=warnings,
            curators=curators,
        )

    @classmethod
    def parse_vaults(cls, items: Iterable[Dict[str, Any]]) -> List[Vault]:
        """Parse a page of vault items, skipping invalid ones."""
        vaults = []
        for item in items:
            try:
                vaults.append(cls.parse_vault(item or {}))
            except VaultParseError as e:
                logger.warning(f"Skipping vault item: {e}")
        return vaults
