"""Morpho protocol-specific implementations.

Configuration: vault_allocator.protocols.morpho.config
GraphQL Queries: vault_allocator.protocols.morpho.queries
"""

from .config import (
    MORPHO_API_RATE_LIMIT,
    MORPHO_API_RATE_WINDOW,
    MORPHO_API_URL,
    MORPHO_VAULTS_PAGE_LIMIT,
    MORPHO_PROTOCOL_NAME,
)
from .queries import MorphoQueries

__all__ = [
    "MORPHO_API_RATE_LIMIT",
    "MORPHO_API_RATE_WINDOW",
    "MORPHO_API_URL",
    "MORPHO_VAULTS_PAGE_LIMIT",
    "MORPHO_PROTOCOL_NAME",
    "MorphoQueries",
]
