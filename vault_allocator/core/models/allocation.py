"""Allocation plan models."""

from dataclasses import dataclass, field
from typing import List, Union

from vault_allocator.core.models.vault import Vault


@dataclass(frozen=True)
class AllocationRecord:
    """One line of an allocation split.

    ``percentage`` is a whole number on the default schedule and a float
    only when the planner normalises weights.
    """

    vault: Vault
    percentage: Union[int, float]
    amount: float
    expected_yield: float

    def to_dict(self) -> dict:
        return {
            "name": self.vault.name,
            "symbol": self.vault.symbol,
            "protocol": self.vault.protocol,
            "risk": self.vault.risk.value,
            "apy": self.vault.apy,
            "percentage": self.percentage,
            "amount": self.amount,
            "expected_yield": self.expected_yield,
        }


@dataclass
class AllocationPlan:
    """Planner output together with the amount it splits."""

    total_amount: float
    records: List[AllocationRecord] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    @property
    def total_percentage(self) -> float:
        return sum(r.percentage for r in self.records)

    @property
    def total_allocated(self) -> float:
        return sum(r.amount for r in self.records)

    @property
    def total_expected_yield(self) -> float:
        return sum(r.expected_yield for r in self.records)

    @property
    def overall_apy(self) -> float:
        """Expected yield as a percentage of the total amount."""
        if self.total_amount == 0:
            return 0.0
        return self.total_expected_yield / self.total_amount * 100

    @property
    def is_overallocated(self) -> bool:
        """True when the schedule assigns more than 100% of the amount."""
        return round(self.total_percentage, 9) > 100

    def to_dict(self) -> dict:
        return {
            "total_amount": self.total_amount,
            "records": [r.to_dict() for r in self.records],
            "total_percentage": self.total_percentage,
            "total_expected_yield": self.total_expected_yield,
            "overall_apy": self.overall_apy,
        }
