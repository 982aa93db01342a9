"""UI Screens for Vault Allocator."""

from .vaults import VaultsScreen
from .planner import PlannerScreen

__all__ = [
    "VaultsScreen",
    "PlannerScreen",
]
