"""Investment plan request derived from an allocation.

The on-chain investment-plan contract takes parallel arrays of vault
addresses, base-unit amounts and deposit tokens plus the member list and
the plan total. This module only builds those arguments; signing and
submission belong to the wallet collaborator.
"""

from dataclasses import dataclass, field
from decimal import ROUND_DOWN, Decimal
from typing import Iterable, List, Sequence, Union

from vault_allocator.core.models import AllocationPlan, AllocationRecord


class NotDepositableError(ValueError):
    """Raised when a planned vault has no address or deposit token."""


@dataclass
class InvestmentRequest:
    """Arguments for ``createInvestmentPlan``."""

    vaults: List[str]
    amounts: List[int]
    tokens: List[str]
    members: List[str] = field(default_factory=list)
    total_amount: int = 0

    def as_args(self) -> tuple:
        """Positional contract call arguments."""
        return (self.vaults, self.amounts, self.tokens, self.members, self.total_amount)


def to_base_units(amount: Union[float, Decimal, str], decimals: int) -> int:
    """
    Convert a human-readable amount to integer token units.

    Digits beyond the token precision are truncated, as the amount would be
    when formatted for the chain.

    Args:
        amount: Amount in whole tokens
        decimals: Token decimals (6 for USDC)

    Returns:
        Amount in the token's smallest unit
    """
    value = Decimal(str(amount))
    scaled = (value * (Decimal(10) ** decimals)).quantize(Decimal("1"), rounding=ROUND_DOWN)
    return int(scaled)


def build_investment_request(
    plan: Union[AllocationPlan, Sequence[AllocationRecord]],
    members: Iterable[str],
    total_amount: Union[float, Decimal, None] = None,
    total_decimals: int = 18,
) -> InvestmentRequest:
    """
    Build the investment-plan call from planner output.

    Args:
        plan: AllocationPlan or its records
        members: Member wallet addresses
        total_amount: Plan total (defaults to the plan's total_amount)
        total_decimals: Decimals used to scale the total

    Returns:
        InvestmentRequest ready for submission

    Raises:
        ValueError: If the plan is empty or no total is available
        NotDepositableError: If a vault lacks an address or underlying asset
    """
    if isinstance(plan, AllocationPlan):
        records = plan.records
        if total_amount is None:
            total_amount = plan.total_amount
    else:
        records = list(plan)

    if not records:
        raise ValueError("Cannot build an investment request from an empty plan")
    if total_amount is None:
        raise ValueError("total_amount is required when passing bare records")

    vaults: List[str] = []
    amounts: List[int] = []
    tokens: List[str] = []

    for record in records:
        vault = record.vault
        if not vault.is_depositable:
            raise NotDepositableError(
                f"Vault {vault.name} ({vault.symbol}) has no deposit information"
            )
        asset = vault.underlying_asset
        vaults.append(vault.address)
        amounts.append(to_base_units(record.amount, asset.decimals))
        tokens.append(asset.address)

    return InvestmentRequest(
        vaults=vaults,
        amounts=amounts,
        tokens=tokens,
        members=list(members),
        total_amount=to_base_units(total_amount, total_decimals),
    )
