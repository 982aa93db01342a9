"""Built-in vault catalog.

A fixed snapshot of USDC vaults used when the live Morpho API is not wanted.
It is a plain value handed to ``StaticVaultSource``; nothing reads it
implicitly.
"""

from typing import List, Sequence

from vault_allocator.core.models import RiskTier, Vault

DEFAULT_VAULT_CATALOG: Sequence[Vault] = (
    Vault(
        name="Pyth USDC",
        symbol="pythUSDC",
        apy=12.79,
        protocol="Morpho",
        risk=RiskTier.MEDIUM,
        description="USDC vault with Pyth oracle integration",
    ),
    Vault(
        name="Universal USDC",
        symbol="uUSDC",
        apy=10.36,
        protocol="Morpho",
        risk=RiskTier.LOW,
        description="Universal USDC lending vault",
    ),
    Vault(
        name="Seamless USDC Vault",
        symbol="smUSDC",
        apy=11.43,
        protocol="Morpho",
        risk=RiskTier.MEDIUM,
        description="Seamless protocol USDC vault",
    ),
    Vault(
        name="Steakhouse USDC",
        symbol="steakUSDC",
        apy=8.09,
        protocol="Morpho",
        risk=RiskTier.LOW,
        description="Steakhouse USDC staking vault",
    ),
    Vault(
        name="Gauntlet USDC Core",
        symbol="gtUSDCc",
        apy=7.54,
        protocol="Morpho",
        risk=RiskTier.LOW,
        description="Gauntlet core USDC vault",
    ),
    Vault(
        name="Ionic Ecosystem USDC",
        symbol="ionicUSDC",
        apy=7.53,
        protocol="Morpho",
        risk=RiskTier.MEDIUM,
        description="Ionic ecosystem USDC vault",
    ),
    Vault(
        name="Re7 USDC",
        symbol="Re7USDC",
        apy=7.43,
        protocol="Morpho",
        risk=RiskTier.MEDIUM,
        description="Re7 protocol USDC vault",
    ),
    Vault(
        name="Gauntlet USDC Prime",
        symbol="gtUSDCp",
        apy=7.37,
        protocol="Morpho",
        risk=RiskTier.LOW,
        description="Gauntlet prime USDC vault",
    ),
    Vault(
        name="Moonwell Flagship USDC",
        symbol="mwUSDC",
        apy=7.37,
        protocol="Morpho",
        risk=RiskTier.MEDIUM,
        description="Moonwell flagship USDC vault",
    ),
    Vault(
        name="Spark USDC Vault",
        symbol="sparkUSDC",
        apy=6.32,
        protocol="Spark.fi",
        risk=RiskTier.LOW,
        description="Spark protocol USDC vault",
    ),
    Vault(
        name="Degen USDC",
        symbol="degenUSDC",
        apy=5.27,
        protocol="Morpho",
        risk=RiskTier.HIGH,
        description="High-risk degen USDC vault",
    ),
)


def default_catalog() -> List[Vault]:
    """Return a fresh list holding the built-in catalog."""
    return list(DEFAULT_VAULT_CATALOG)
