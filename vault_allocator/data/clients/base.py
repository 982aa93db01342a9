"""Base vault source interface.

Defines the abstract interface every vault supplier implements, so the
pipeline can plan over a live protocol API or a fixed catalog alike.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence

from vault_allocator.core.models import Vault


class VaultSource(ABC):
    """Abstract base class for anything that yields vault candidates."""

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Return a human-readable source name."""
        ...

    @abstractmethod
    async def get_vaults(self) -> List[Vault]:
        """Fetch every vault this source offers.

        Returns:
            List of Vault objects
        """
        ...

    async def close(self) -> None:
        """Close any open connections and clean up resources."""
        return None


class StaticVaultSource(VaultSource):
    """Serves a catalog handed in by the caller."""

    def __init__(self, catalog: Sequence[Vault], name: str = "Static catalog"):
        self._catalog = tuple(catalog)
        self._name = name

    @property
    def source_name(self) -> str:
        return self._name

    async def get_vaults(self) -> List[Vault]:
        return list(self._catalog)
