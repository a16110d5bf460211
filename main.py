import logging
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from config import settings
from library import Library
from logging_config import setup_logging
from repository import InMemoryBookRepository, InMemoryMemberRepository
from utils.ui_helpers import print_record, set_output_mode
from utils.validators import TextValidator

logger = logging.getLogger(__name__)

_console = Console()

MENU_ITEMS = [
    ("1", "Add Book", "📚"),
    ("2", "Add Member", "👤"),
    ("3", "Exit", "🚪"),
]

INVALID_CHOICE_MESSAGE = "Invalid choice. Please try again."
GOODBYE_MESSAGE = "Exiting the application. Goodbye!"


class LibraryService:
    """Menu-driven console front end for a :class:`Library`."""

    def __init__(self, library: Library, console: Optional[Console] = None) -> None:
        self.library = library
        self.console = console or _console

    def run(self) -> None:
        self.console.print(f"[bold cyan]Welcome to the {escape(settings.app_name)}![/]")
        try:
            while True:
                self.render_menu()
                choice = Prompt.ask("Enter your choice", console=self.console).strip()

                if choice == "1":
                    self.add_book()
                elif choice == "2":
                    self.add_member()
                elif choice == "3":
                    self.console.print(f"[green]{GOODBYE_MESSAGE}[/]")
                    return
                else:
                    self.console.print(f"[yellow]{INVALID_CHOICE_MESSAGE}[/]")
        except (EOFError, KeyboardInterrupt):
            # Input closed mid-session
            self.console.print()
            self.console.print(f"[green]{GOODBYE_MESSAGE}[/]")

    def render_menu(self) -> None:
        table = Table.grid(padding=(0, 2))
        table.add_column(justify="right", style="bold cyan", width=4)
        table.add_column(justify="left", style="white")
        for key, label, icon in MENU_ITEMS:
            table.add_row(f"[reverse]{key}[/]", f"{icon} {label}")

        self.console.print(Panel(
            table,
            title=escape(settings.app_name),
            border_style="cyan",
            box=box.HEAVY,
            padding=(1, 2),
        ))

    def add_book(self) -> None:
        self.console.print("Enter book details:")
        title = self._ask_required("Title")
        author = self._ask_required("Author")

        book = self.library.add_book(title, author)
        logger.info(f"Book added: id={book.id}")
        self.console.print("[green]Book added successfully![/]")
        print_record(book)

    def add_member(self) -> None:
        self.console.print("Enter member details:")
        name = self._ask_required("Name")

        member = self.library.add_member(name)
        logger.info(f"Member added: id={member.id}")
        self.console.print("[green]Member added successfully![/]")
        print_record(member)

    def _ask_required(self, label: str) -> str:
        """Prompt until a non-blank answer is given."""
        while True:
            value = Prompt.ask(label, console=self.console)
            if TextValidator.is_present(value):
                return TextValidator.clean(value)
            self.console.print(f"[red]{label} cannot be empty.[/]")


def build_service(console: Optional[Console] = None) -> LibraryService:
    """Wire in-memory repositories into a Library and wrap it in the menu service."""
    library = Library(InMemoryBookRepository(), InMemoryMemberRepository())
    return LibraryService(library, console=console)


# --- Typer CLI Application ---
app = typer.Typer(help="Library CLI")

@app.callback(invoke_without_command=True)
def _global_options(
    ctx: typer.Context,
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format for added records: plain | json | rich (default: plain)",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level name, e.g. DEBUG or INFO (default: LOG_LEVEL or WARNING)",
    ),
):
    """Global CLI options. Without a sub-command the interactive menu starts."""
    setup_logging(log_level or settings.log_level)
    set_output_mode(output or settings.output_mode)
    if ctx.invoked_subcommand is None:
        cli_menu()

@app.command("menu")
def cli_menu():
    """Start the interactive library menu."""
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    build_service().run()


if __name__ == "__main__":
    app()
