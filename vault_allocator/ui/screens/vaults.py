"""Vault browser: risk-filtered, paged vault listing."""

import logging
from typing import Optional

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, ScrollableContainer, Vertical
from textual.widget import Widget
from textual.widgets import DataTable, Label, Select, Static

from config.settings import Settings
from vault_allocator.core.models import RiskTier, Vault, VaultPage
from vault_allocator.data.pipeline import VaultPipeline
from vault_allocator.ui.widgets.formatting import (
    format_usd,
    format_vault_details,
    risk_text,
)

logger = logging.getLogger(__name__)


class VaultsScreen(Widget):
    """Widget listing vaults of one risk tier, a page at a time."""

    DEFAULT_CSS = """
    VaultsScreen {
        height: 100%;
        layout: horizontal;
    }
    #vaults-left {
        width: 60%;
        border-right: solid #333;
    }
    #vaults-right {
        width: 40%;
        padding: 1;
    }
    #vaults-left-header, #vaults-right-header {
        dock: top;
        height: 3;
        background: #111;
        padding: 1;
        color: #ff8c00;
        text-style: bold;
    }
    #vaults-filters {
        dock: top;
        height: 4;
        background: #0a0a0a;
        padding: 0 1;
    }
    #vaults-filters Label {
        color: #888;
        padding: 1 1 0 0;
    }
    #risk-select {
        width: 24;
    }
    #vaults-page-info {
        dock: bottom;
        height: 1;
        background: #111;
        color: #888;
        padding: 0 1;
    }
    #vaults-table {
        height: 100%;
    }
    DataTable > .datatable--header {
        background: #111;
        color: #ff8c00;
    }
    DataTable:focus > .datatable--cursor {
        background: #ff8c00;
        color: #000;
    }
    """

    BINDINGS = [
        Binding("n", "next_page", "Next page"),
        Binding("p", "previous_page", "Prev page"),
    ]

    def __init__(self, pipeline: VaultPipeline, settings: Settings, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.pipeline = pipeline
        self.settings = settings
        self._risk: RiskTier = RiskTier.MEDIUM
        self._page_number: int = 1
        self._page: Optional[VaultPage] = None
        self._selected_vault: Optional[Vault] = None

    def compose(self) -> ComposeResult:
        with Container(id="vaults-left"):
            yield Static("VAULTS BY RISK", id="vaults-left-header")
            with Horizontal(id="vaults-filters"):
                yield Label("Risk:")
                yield Select(
                    [(tier.value, tier.value) for tier in RiskTier],
                    value=self._risk.value,
                    allow_blank=False,
                    id="risk-select",
                )
            with ScrollableContainer():
                yield DataTable(id="vaults-table", cursor_type="row", zebra_stripes=True)
            yield Static("", id="vaults-page-info")
        with Vertical(id="vaults-right"):
            yield Static("VAULT DETAILS", id="vaults-right-header")
            with ScrollableContainer():
                yield Static("Select a vault...", id="vaults-details")

    async def on_mount(self) -> None:
        table = self.query_one("#vaults-table", DataTable)
        table.add_column("#", width=4)
        table.add_column("Name", width=22)
        table.add_column("Symbol", width=10)
        table.add_column("APY", width=8)
        table.add_column("Risk", width=7)
        table.add_column("Protocol", width=10)
        table.add_column("TVL", width=10)

        await self._load_page()

    async def refresh_data(self) -> None:
        """Refetch vaults and redraw the current page."""
        await self.pipeline.get_vaults(force_refresh=True)
        await self._load_page()

    async def _load_page(self) -> None:
        try:
            self._page = await self.pipeline.get_vaults_page(self._risk, self._page_number)
        except Exception as e:
            logger.error(f"Error loading vaults: {e}")
            self._update_page_info(f"Error: {e}")
            return
        self._update_table()

    def _update_table(self) -> None:
        table = self.query_one("#vaults-table", DataTable)
        table.clear()

        page = self._page
        if page is None or page.is_empty:
            self._update_page_info(
                f"{self._risk.value} risk | Page {self._page_number} | "
                "No vaults found for this risk level."
            )
            return

        for offset, v in enumerate(page.vaults):
            table.add_row(
                str(page.first_index + offset),
                v.name[:20] if len(v.name) > 20 else v.name,
                v.symbol,
                f"{v.apy:.2f}%",
                risk_text(v.risk),
                v.protocol,
                format_usd(v.total_assets_usd),
                key=str(page.first_index + offset),
            )

        hint = "N: next page" if page.has_more else ""
        if self._page_number > 1:
            hint = f"{hint}  P: previous page".strip()
        self._update_page_info(f"{self._risk.value} risk | Page {self._page_number} | {hint}")

    def _update_page_info(self, message: str) -> None:
        self.query_one("#vaults-page-info", Static).update(message)

    @on(Select.Changed, "#risk-select")
    async def on_risk_changed(self, event: Select.Changed) -> None:
        self._risk = RiskTier(event.value)
        self._page_number = 1
        await self._load_page()

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Show the details of the selected vault."""
        if self._page is None or event.row_key is None:
            return
        index = int(event.row_key.value) - self._page.first_index
        if not 0 <= index < len(self._page.vaults):
            return

        self._selected_vault = self._page.vaults[index]
        self.query_one("#vaults-details", Static).update(
            format_vault_details(self._selected_vault)
        )

    async def action_next_page(self) -> None:
        if self._page is not None and self._page.has_more:
            self._page_number += 1
            await self._load_page()

    async def action_previous_page(self) -> None:
        if self._page_number > 1:
            self._page_number -= 1
            await self._load_page()
