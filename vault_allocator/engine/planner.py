"""Greedy diversified allocation across yield vaults."""

import logging
from typing import List, Optional, Sequence, Union

from vault_allocator.core.constants import LEADING_PERCENTAGES, TAIL_PERCENTAGE
from vault_allocator.core.models import AllocationRecord, RiskTier, Vault

logger = logging.getLogger(__name__)


class AllocationPlanner:
    """
    Splits an amount across a bounded set of vaults.

    Selection order:
    1. the highest-APY vault
    2. the best Low-risk vault not yet chosen
    3. the best Medium-risk vault not yet chosen
    4. further vaults by APY until ``num_vaults`` are chosen

    Weights follow selection order: 50%, 30%, then 20% for every further
    vault. The schedule is not rescaled, so four or more vaults allocate
    more than 100% unless the planner is built with ``normalize=True``.

    The planner holds no state between calls and never mutates its input.
    """

    def __init__(self, normalize: bool = False):
        self.normalize = normalize

    def plan(
        self,
        candidates: Sequence[Vault],
        total_amount: float,
        num_vaults: int,
    ) -> List[AllocationRecord]:
        """
        Build the allocation for ``total_amount``.

        Args:
            candidates: Vaults to choose from
            total_amount: Amount to split (not validated here)
            num_vaults: Maximum number of vaults to select

        Returns:
            Records in selection order; empty when there are no candidates
        """
        selected = self.select(candidates, num_vaults)
        percentages = self.percentages(len(selected))

        records = []
        for vault, percentage in zip(selected, percentages):
            amount = total_amount * percentage / 100
            expected_yield = amount * vault.apy / 100
            records.append(AllocationRecord(
                vault=vault,
                percentage=percentage,
                amount=amount,
                expected_yield=expected_yield,
            ))

        logger.debug(
            f"Planned {len(records)} of {len(candidates)} vaults "
            f"for {total_amount} (target {num_vaults})"
        )
        return records

    def plan_for_risk(
        self,
        candidates: Sequence[Vault],
        risk: RiskTier,
        total_amount: float,
        num_vaults: int,
    ) -> List[AllocationRecord]:
        """Plan over the candidates of a single risk tier only."""
        filtered = [v for v in candidates if v.risk == risk]
        return self.plan(filtered, total_amount, num_vaults)

    @staticmethod
    def select(candidates: Sequence[Vault], num_vaults: int) -> List[Vault]:
        """
        Pick up to ``num_vaults`` distinct vaults in selection order.

        Vaults are told apart by identity, so equal-looking entries from
        different sources are still distinct candidates.
        """
        # sorted() is stable: equal APYs keep their input order
        ranked = sorted(candidates, key=lambda v: v.apy, reverse=True)
        taken = [False] * len(ranked)
        selected: List[Vault] = []

        def take(index: Optional[int]) -> None:
            if index is None or len(selected) >= num_vaults:
                return
            taken[index] = True
            selected.append(ranked[index])

        def first_free(risk: Optional[RiskTier] = None) -> Optional[int]:
            for i, vault in enumerate(ranked):
                if taken[i]:
                    continue
                if risk is None or vault.risk == risk:
                    return i
            return None

        if not ranked:
            return selected

        take(0)
        take(first_free(RiskTier.LOW))
        take(first_free(RiskTier.MEDIUM))

        while len(selected) < num_vaults:
            index = first_free()
            if index is None:
                break
            take(index)

        return selected

    def percentages(self, count: int) -> List[Union[int, float]]:
        """Weights for ``count`` selected vaults, in selection order.

        Integers on the literal schedule, floats once normalised.
        """
        schedule: List[Union[int, float]] = []
        for position in range(count):
            if position < len(LEADING_PERCENTAGES):
                schedule.append(LEADING_PERCENTAGES[position])
            else:
                schedule.append(TAIL_PERCENTAGE)

        if self.normalize and schedule:
            total = sum(schedule)
            schedule = [p * 100 / total for p in schedule]

        return schedule
