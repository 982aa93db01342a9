"""Vault data models for allocation planning."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class RiskTier(Enum):
    """Coarse risk classification used to diversify a selection."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class RiskPreference(Enum):
    """Investor-facing risk preference."""

    CONSERVATIVE = "Conservative"
    BALANCED = "Balanced"
    AGGRESSIVE = "Aggressive"


@dataclass(frozen=True)
class UnderlyingAsset:
    """ERC-20 token a vault accepts as deposit."""

    address: str
    symbol: str
    name: str
    decimals: int


@dataclass(frozen=True)
class Vault:
    """Yield vault candidate.

    ``apy`` is in percentage units (12.79 means 12.79%). Vaults without an
    underlying asset are informational only and cannot be deposited into.
    """

    name: str
    symbol: str
    apy: float
    protocol: str
    risk: RiskTier

    # Optional fields with defaults
    address: Optional[str] = None
    underlying_asset: Optional[UnderlyingAsset] = None
    description: str = ""
    total_assets_usd: Optional[float] = None
    risk_score: Optional[float] = None
    warnings: List[str] = field(default_factory=list, hash=False)
    curators: List[str] = field(default_factory=list, hash=False)

    @property
    def is_depositable(self) -> bool:
        """True when the vault can take a deposit."""
        return bool(self.address) and self.underlying_asset is not None

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on name or symbol."""
        search = query.strip().lower()
        if not search:
            return False
        return search in self.name.lower() or search in self.symbol.lower()


@dataclass
class VaultPage:
    """One page of a vault listing."""

    vaults: List[Vault]
    page: int
    page_size: int
    has_more: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.vaults

    @property
    def first_index(self) -> int:
        """1-based position of the first vault on this page in the full list."""
        return (self.page - 1) * self.page_size + 1
