"""UI widgets and display helpers for Vault Allocator."""

from .formatting import (
    format_usd,
    format_percentage,
    format_plan_summary,
    format_vault_details,
    risk_style,
    risk_text,
    shorten_address,
)

__all__ = [
    "format_usd",
    "format_percentage",
    "format_plan_summary",
    "format_vault_details",
    "risk_style",
    "risk_text",
    "shorten_address",
]
