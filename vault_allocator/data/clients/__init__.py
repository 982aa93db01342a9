"""Vault source clients.

Provides a unified interface for supplying vault candidates.
"""

from vault_allocator.data.clients.base import VaultSource, StaticVaultSource

__all__ = [
    "VaultSource",
    "StaticVaultSource",
]
