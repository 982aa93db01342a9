"""Allocation planner screen."""

import logging

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.widget import Widget
from textual.widgets import Button, DataTable, Input, Label, Select, Static

from config.settings import Settings
from vault_allocator.core.models import AllocationPlan, RiskPreference
from vault_allocator.data.pipeline import VaultPipeline
from vault_allocator.ui.widgets.formatting import (
    format_percentage,
    format_plan_summary,
    format_usd,
    risk_text,
)

logger = logging.getLogger(__name__)


class PlannerScreen(Widget):
    """Split an amount across vaults of the chosen risk preference."""

    DEFAULT_CSS = """
    PlannerScreen {
        height: 100%;
    }
    #planner-config {
        height: auto;
        background: #0a0a0a;
        padding: 1;
    }
    #planner-title, #planner-results-title {
        color: #ff8c00;
        text-style: bold;
        padding: 0 1;
    }
    .config-row {
        height: 3;
    }
    .config-label {
        width: 12;
        padding: 1 1 0 0;
        color: #888;
    }
    .param-input {
        width: 16;
    }
    #preference-select {
        width: 20;
    }
    Button {
        background: #222;
        color: #ff8c00;
        border: solid #444;
    }
    Button:focus {
        border: solid #ff8c00;
    }
    Input {
        background: #111;
        border: solid #333;
    }
    Input:focus {
        border: solid #ff8c00;
    }
    #plan-table {
        height: auto;
        max-height: 50%;
    }
    #plan-summary {
        padding: 1;
    }
    #planner-status {
        dock: bottom;
        height: 1;
        background: #111;
        color: #888;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("enter", "run_plan", "Plan", show=True),
    ]

    def __init__(self, pipeline: VaultPipeline, settings: Settings, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.pipeline = pipeline
        self.settings = settings

    def compose(self) -> ComposeResult:
        with Vertical():
            with Container(id="planner-config"):
                yield Static("Allocation Planner", id="planner-title")
                with Horizontal(classes="config-row"):
                    yield Label("Amount:", classes="config-label")
                    yield Input(value="100", id="amount-input", classes="param-input")
                    yield Label("Preference:", classes="config-label")
                    yield Select(
                        [(pref.value, pref.value) for pref in RiskPreference],
                        value=RiskPreference.BALANCED.value,
                        allow_blank=False,
                        id="preference-select",
                    )
                    yield Label("Vaults:", classes="config-label")
                    yield Input(
                        value=str(self.settings.default_num_vaults),
                        id="count-input",
                        classes="param-input",
                    )
                    yield Button("Plan", id="plan-button", variant="primary")
            yield Static("Recommended Allocation", id="planner-results-title")
            yield DataTable(id="plan-table", cursor_type="row", zebra_stripes=True)
            yield Static("", id="plan-summary")
            yield Static("Ready | Enter: Plan", id="planner-status")

    def on_mount(self) -> None:
        table = self.query_one("#plan-table", DataTable)
        table.add_column("#", width=3)
        table.add_column("Vault", width=24)
        table.add_column("APY", width=8)
        table.add_column("Risk", width=7)
        table.add_column("Weight", width=8)
        table.add_column("Amount", width=12)
        table.add_column("Yield/yr", width=12)

    def _update_status(self, message: str) -> None:
        self.query_one("#planner-status", Static).update(message)

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "plan-button":
            await self._run_plan()

    async def action_run_plan(self) -> None:
        await self._run_plan()

    def _read_inputs(self) -> tuple:
        """Parse the form; raises ValueError with a user-facing message."""
        amount_text = self.query_one("#amount-input", Input).value.strip()
        count_text = self.query_one("#count-input", Input).value.strip()

        try:
            amount = float(amount_text)
        except ValueError:
            raise ValueError(f"Invalid amount: {amount_text!r}")
        if not amount > 0:
            raise ValueError("Please enter a valid amount greater than 0.")

        try:
            num_vaults = int(count_text)
        except ValueError:
            raise ValueError(f"Invalid vault count: {count_text!r}")
        if num_vaults < 1:
            raise ValueError("Vault count must be at least 1.")

        preference = str(self.query_one("#preference-select", Select).value)
        return amount, preference, num_vaults

    async def _run_plan(self) -> None:
        try:
            amount, preference, num_vaults = self._read_inputs()
        except ValueError as e:
            self._update_status(f"Error: {e}")
            return

        self._update_status("Planning...")
        try:
            plan = await self.pipeline.plan_allocation(amount, preference, num_vaults)
        except Exception as e:
            logger.error(f"Error planning allocation: {e}")
            self._update_status(f"Error: {e}")
            return

        self._show_plan(plan)
        self._update_status(f"Planned {len(plan)} vaults ({preference})")

    def _show_plan(self, plan: AllocationPlan) -> None:
        table = self.query_one("#plan-table", DataTable)
        table.clear()

        for index, record in enumerate(plan.records, start=1):
            vault = record.vault
            table.add_row(
                str(index),
                vault.name[:22] if len(vault.name) > 22 else vault.name,
                f"{vault.apy:.2f}%",
                risk_text(vault.risk),
                format_percentage(record.percentage),
                format_usd(record.amount),
                format_usd(record.expected_yield),
            )

        self.query_one("#plan-summary", Static).update(format_plan_summary(plan))
