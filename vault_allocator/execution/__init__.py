"""Hand-off of allocation plans to on-chain collaborators."""

from .investment import (
    InvestmentRequest,
    NotDepositableError,
    build_investment_request,
    to_base_units,
)

__all__ = [
    "InvestmentRequest",
    "NotDepositableError",
    "build_investment_request",
    "to_base_units",
]
