"""Core data models for Vault Allocator."""

from .vault import RiskTier, RiskPreference, UnderlyingAsset, Vault, VaultPage
from .allocation import AllocationRecord, AllocationPlan

__all__ = [
    "RiskTier",
    "RiskPreference",
    "UnderlyingAsset",
    "Vault",
    "VaultPage",
    "AllocationRecord",
    "AllocationPlan",
]
