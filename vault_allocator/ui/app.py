"""Main Textual application for Vault Allocator."""

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Static, TabbedContent, TabPane

from config.settings import get_settings
from vault_allocator.data.pipeline import VaultPipeline
from vault_allocator.ui.screens.planner import PlannerScreen
from vault_allocator.ui.screens.vaults import VaultsScreen

logger = logging.getLogger(__name__)


class VaultAllocatorApp(App):
    """Terminal UI for browsing vaults and planning allocations."""

    TITLE = "Vault Allocator"

    CSS = """
    Screen { background: #000000; }

    TabbedContent {
        height: 100%;
    }
    TabbedContent Tabs {
        background: #111;
    }
    TabbedContent Tab {
        background: #111;
        color: #888;
        padding: 0 2;
    }
    TabbedContent Tab.-active {
        background: #222;
        color: #ff8c00;
        text-style: bold;
    }
    TabbedContent Underline .underline--bar {
        background: #ff8c00;
    }
    TabbedContent TabPane {
        height: 100%;
    }

    #status {
        dock: bottom;
        height: 1;
        background: #111;
        color: #888;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("r", "refresh", "Refresh"),
        Binding("1", "show_vaults", "Vaults"),
        Binding("2", "show_planner", "Planner"),
    ]

    def __init__(self):
        super().__init__()
        self.settings = get_settings()
        self.pipeline = VaultPipeline(settings=self.settings)

    def compose(self) -> ComposeResult:
        yield Header()
        with TabbedContent(initial="tab-vaults", id="main-tabs"):
            with TabPane("Vaults", id="tab-vaults"):
                yield VaultsScreen(
                    pipeline=self.pipeline,
                    settings=self.settings,
                    id="vaults-screen",
                )
            with TabPane("Planner", id="tab-planner"):
                yield PlannerScreen(
                    pipeline=self.pipeline,
                    settings=self.settings,
                    id="planner-screen",
                )
        yield Static(
            f"1: Vaults  2: Planner | R: Refresh  Q: Quit | Source: {self.pipeline.source.source_name}",
            id="status",
        )
        yield Footer()

    async def action_refresh(self) -> None:
        """Refetch vault data."""
        try:
            await self.query_one("#vaults-screen", VaultsScreen).refresh_data()
        except Exception as e:
            logger.error(f"Error refreshing: {e}")

    def action_show_vaults(self) -> None:
        self.query_one("#main-tabs", TabbedContent).active = "tab-vaults"

    def action_show_planner(self) -> None:
        self.query_one("#main-tabs", TabbedContent).active = "tab-planner"

    async def on_unmount(self) -> None:
        await self.pipeline.close()


def main():
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    VaultAllocatorApp().run()


if __name__ == "__main__":
    main()
