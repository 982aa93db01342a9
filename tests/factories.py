"""Test data builders."""

from vault_allocator.core.models import RiskTier, UnderlyingAsset, Vault

USDC_BASE = UnderlyingAsset(
    address="0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913",
    symbol="USDC",
    name="USD Coin",
    decimals=6,
)


def make_vault(name: str, apy: float, risk: RiskTier, **kwargs) -> Vault:
    """Build a test vault with the symbol derived from the name."""
    kwargs.setdefault("symbol", name.replace(" ", "")[:10])
    kwargs.setdefault("protocol", "Morpho")
    return Vault(name=name, apy=apy, risk=risk, **kwargs)
