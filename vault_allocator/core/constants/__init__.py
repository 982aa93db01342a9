"""Core constants module.

Re-exports all constants for convenience.
"""

from vault_allocator.core.constants.generic import (
    LEADING_PERCENTAGES,
    TAIL_PERCENTAGE,
    LOW_RISK_MIN_SCORE,
    HIGH_RISK_MAX_SCORE,
    LOW_RISK_MAX_APY,
    HIGH_RISK_MIN_APY,
    DEFAULT_NUM_VAULTS,
    DEFAULT_PAGE_SIZE,
)

from vault_allocator.core.constants.chains import BASE_CHAIN_ID

__all__ = [
    # Generic
    "LEADING_PERCENTAGES",
    "TAIL_PERCENTAGE",
    "LOW_RISK_MIN_SCORE",
    "HIGH_RISK_MAX_SCORE",
    "LOW_RISK_MAX_APY",
    "HIGH_RISK_MIN_APY",
    "DEFAULT_NUM_VAULTS",
    "DEFAULT_PAGE_SIZE",
    # Chains
    "BASE_CHAIN_ID",
]
