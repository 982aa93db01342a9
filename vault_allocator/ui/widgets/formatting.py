"""Display helpers shared by the vault and planner screens."""

from typing import Optional

from rich.text import Text

from vault_allocator.core.models import AllocationPlan, RiskTier, Vault

RISK_STYLES = {
    RiskTier.LOW: "green",
    RiskTier.MEDIUM: "yellow",
    RiskTier.HIGH: "red",
}


def format_usd(value: Optional[float]) -> str:
    """Format a USD value with appropriate suffix."""
    if value is None:
        return "N/A"
    if value >= 1_000_000_000:
        return f"${value/1_000_000_000:.2f}B"
    elif value >= 1_000_000:
        return f"${value/1_000_000:.2f}M"
    elif value >= 1_000:
        return f"${value/1_000:.2f}K"
    else:
        return f"${value:.2f}"


def format_percentage(value: float) -> str:
    """Whole percentages without decimals, others with two."""
    if float(value).is_integer():
        return f"{int(value)}%"
    return f"{value:.2f}%"


def shorten_address(addr: Optional[str], chars: int = 6) -> str:
    """Shorten an Ethereum address for display."""
    if not addr or len(addr) < 10:
        return addr or ""
    return f"{addr[:chars]}...{addr[-4:]}"


def risk_style(risk: RiskTier) -> str:
    return RISK_STYLES.get(risk, "white")


def risk_text(risk: RiskTier) -> Text:
    """Risk tier label coloured by tier."""
    return Text(risk.value, style=risk_style(risk))


def format_vault_details(vault: Vault) -> Text:
    """Details panel for a single vault."""
    output = Text()
    output.append("─" * 44 + "\n", style="dim")
    output.append("VAULT DETAILS\n", style="bold #ff8c00")
    output.append("─" * 44 + "\n", style="dim")

    output.append(f"{vault.name}\n", style="bold cyan")
    output.append(f"Symbol: {vault.symbol}\n", style="dim")
    if vault.description:
        output.append(f"{vault.description}\n", style="white")
    output.append("\n")

    output.append("Protocol: ", style="dim")
    output.append(f"{vault.protocol}\n", style="white")
    output.append("APY: ", style="dim")
    output.append(f"{vault.apy:.2f}%\n", style="bold green")
    output.append("Risk: ", style="dim")
    output.append_text(risk_text(vault.risk))
    if vault.risk_score is not None:
        output.append(f" (score {vault.risk_score:g}/10)", style="dim")
    output.append("\n")
    output.append("TVL: ", style="dim")
    output.append(f"{format_usd(vault.total_assets_usd)}\n", style="bold cyan")

    if vault.curators:
        output.append("Curators: ", style="dim")
        output.append(f"{', '.join(vault.curators)}\n", style="white")
    if vault.warnings:
        output.append("Warnings: ", style="dim")
        output.append(f"{', '.join(vault.warnings)}\n", style="red")

    output.append("\n")
    if vault.is_depositable:
        asset = vault.underlying_asset
        output.append("Vault Address:\n", style="dim")
        output.append(f"  {vault.address}\n", style="white")
        output.append("Underlying Asset:\n", style="dim")
        output.append(f"  {asset.symbol} ({asset.name}) ", style="green")
        output.append(f"{shorten_address(asset.address)}\n", style="dim green")
    else:
        output.append("Deposit information not available for this vault\n", style="yellow")

    return output


def format_plan_summary(plan: AllocationPlan) -> Text:
    """Totals panel for an allocation plan."""
    output = Text()
    if not plan.records:
        output.append("No vaults available for this risk level.\n", style="yellow")
        return output

    output.append("Investment: ", style="dim")
    output.append(f"{format_usd(plan.total_amount)}\n", style="bold white")
    output.append("Overall APY: ", style="dim")
    output.append(f"{plan.overall_apy:.2f}%\n", style="bold green")
    output.append("Expected Annual Yield: ", style="dim")
    output.append(f"{format_usd(plan.total_expected_yield)}\n", style="bold green")
    output.append("Allocated: ", style="dim")
    output.append(
        f"{format_percentage(plan.total_percentage)} ({format_usd(plan.total_allocated)})\n",
        style="red bold" if plan.is_overallocated else "white",
    )
    if plan.is_overallocated:
        output.append(
            "Weights exceed 100% of the amount; enable NORMALIZE_PERCENTAGES to rescale.\n",
            style="red",
        )
    return output
