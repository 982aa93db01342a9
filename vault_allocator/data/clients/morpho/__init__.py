"""Morpho protocol client module."""

from vault_allocator.data.clients.morpho.client import MorphoVaultClient
from vault_allocator.data.clients.morpho.parser import MorphoVaultParser, VaultParseError

__all__ = [
    "MorphoVaultClient",
    "MorphoVaultParser",
    "VaultParseError",
]
