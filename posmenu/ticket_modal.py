"""Kitchen ticket / receipt preview modal screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static

from posmenu.rendering import format_ticket


class TicketModal(ModalScreen[None]):
    """Centered modal showing the lines a ticket or receipt would carry."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
        ("ctrl+c", "close", "Close"),
    ]

    CSS = """
    TicketModal {
        align: center middle;
        background: $background 60%;
    }

    #ticket-dialog {
        width: 56;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #ticket-body {
        color: white;
    }

    #ticket-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    def __init__(self, title: str, rows: list[str]) -> None:
        super().__init__()
        self.title_text = title
        self.ticket_rows = rows

    def compose(self) -> ComposeResult:
        with Container(id="ticket-dialog"):
            yield Static(id="ticket-body")
            yield Static("Esc / q / Ctrl+C to close", id="ticket-help")

    def on_mount(self) -> None:
        self.query_one("#ticket-body", Static).update(format_ticket(self.title_text, self.ticket_rows))

    def action_close(self) -> None:
        self.dismiss()
