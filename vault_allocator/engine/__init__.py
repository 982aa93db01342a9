"""Allocation engine components."""

from .planner import AllocationPlanner
from .risk import RiskClassifier
from .pagination import paginate

__all__ = [
    "AllocationPlanner",
    "RiskClassifier",
    "paginate",
]
