"""Core module - models, constants and the built-in catalog."""

from .models import (
    RiskTier,
    RiskPreference,
    UnderlyingAsset,
    Vault,
    VaultPage,
    AllocationRecord,
    AllocationPlan,
)
from .catalog import DEFAULT_VAULT_CATALOG, default_catalog

__all__ = [
    "RiskTier",
    "RiskPreference",
    "UnderlyingAsset",
    "Vault",
    "VaultPage",
    "AllocationRecord",
    "AllocationPlan",
    "DEFAULT_VAULT_CATALOG",
    "default_catalog",
]
