import logging
import sys
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Confirm, IntPrompt, Prompt
from rich import box
import typer

from config import settings
from errors import ValidationError
from library import Library
from utils.ui_helpers import set_output_mode, print_list_result

console = Console()

app = typer.Typer(help=f"{settings.app_name} CLI")

# Set by the global callback, read by every command
state = {"data_file": None}


def get_library() -> Library:
    """Build a store for the configured data file and load it."""
    lib = Library(data_file=state["data_file"])
    lib.load()
    return lib


@app.callback()
def _global_options(
    data_file: Optional[str] = typer.Option(
        None,
        "--data-file",
        "-d",
        envvar="LIBRARY_DATA_FILE",
        help="Path of the catalog file (default: library.csv)",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
):
    """Global options for the CLI (data file, output mode)."""
    logging.basicConfig(level=settings.log_level)
    state["data_file"] = data_file
    if output:
        set_output_mode(output)


@app.command("list")
def cli_list():
    """List every book in catalog order."""
    print_list_result(get_library().list_books())


@app.command("add")
def cli_add(title: str, author: str):
    """Add a book and print the id it was given."""
    lib = get_library()
    try:
        book = lib.add_book(title, author)
    except ValidationError as e:
        print(f"Error: {e}")
        raise typer.Exit(code=1)
    print(f"Added book with ID {book.id}.")


def _update_status(book_id: int, checked_out: bool) -> None:
    lib = get_library()
    if not lib.set_status(book_id, checked_out):
        print(f"Error: Book with ID {book_id} not found.")
        raise typer.Exit(code=1)
    label = "Checked Out" if checked_out else "Available"
    print(f"Updated book with ID {book_id} to {label}.")


@app.command("checkout")
def cli_checkout(book_id: int):
    """Mark a book as checked out."""
    _update_status(book_id, True)


@app.command("checkin")
def cli_checkin(book_id: int):
    """Mark a book as available again."""
    _update_status(book_id, False)


@app.command("delete")
def cli_delete(
    book_id: int,
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
):
    """Delete a book by id, after confirmation."""
    lib = get_library()
    book = lib.find_book(book_id)
    if book is None:
        print(f"Error: Book with ID {book_id} not found, cannot delete.")
        raise typer.Exit(code=1)

    if settings.confirm_deletions and not yes:
        if not Confirm.ask(f"Delete '{book.title}' by {book.author}?", default=False):
            print("Deletion cancelled.")
            return

    lib.delete_by_id(book_id)
    print(f"Deleted book with ID {book_id} from the library.")


@app.command("seed")
def cli_seed():
    """Write the default catalog if the data file is missing or empty."""
    from catalog import SEED_BOOKS, seed_if_empty

    path = Library(data_file=state["data_file"]).data_file
    if seed_if_empty(path):
        print(f"Seeded initial library with {len(SEED_BOOKS)} books.")
    else:
        print(f"{path} already has data, nothing to seed.")


@app.command("menu")
def cli_menu():
    """Start the interactive menu."""
    run_menu(get_library())


# ------------------------- Interactive menu ------------------------- #
MENU_ITEMS = [
    ("1", "Add a book", "➕"),
    ("2", "List all books", "📚"),
    ("3", "Check out a book", "📤"),
    ("4", "Check in a book", "📥"),
    ("5", "Delete a book", "🗑️"),
    ("6", "Exit", "🚪"),
]


def render_menu() -> None:
    table = Table.grid(padding=(0, 2))
    table.add_column(justify="right", style="bold cyan", width=4)
    table.add_column(justify="left", style="white")
    for key, label, icon in MENU_ITEMS:
        table.add_row(f"[reverse]{key}[/]", f"{icon} {label}")

    console.print(Panel(table, title=settings.app_name, border_style="cyan", box=box.HEAVY, padding=(1, 2)))


def _menu_add(lib: Library) -> None:
    title = Prompt.ask("Enter book title")
    author = Prompt.ask("Enter book author")
    try:
        book = lib.add_book(title, author)
    except ValidationError as e:
        console.print(f"[bold red]Error:[/] {e}")
        return
    console.print(f"[green]Added book with ID {book.id}.[/]")


def _menu_status(lib: Library, checked_out: bool) -> None:
    print_list_result(lib.list_books())
    book_id = IntPrompt.ask("Enter book ID")
    if lib.set_status(book_id, checked_out):
        label = "Checked Out" if checked_out else "Available"
        console.print(f"[green]Updated book with ID {book_id} to {label}.[/]")
    else:
        console.print(f"[bold red]Error:[/] Book with ID {book_id} not found.")


def _menu_delete(lib: Library) -> None:
    print_list_result(lib.list_books())
    book_id = IntPrompt.ask("Enter book ID to delete")
    if lib.find_book(book_id) is None:
        console.print(f"[bold red]Error:[/] Book with ID {book_id} not found, cannot delete.")
        return
    if settings.confirm_deletions and not Confirm.ask("Are you sure?", default=False):
        console.print("[yellow]Deletion cancelled.[/]")
        return
    lib.delete_by_id(book_id)
    console.print(f"[green]Deleted book with ID {book_id} from the library.[/]")


def run_menu(lib: Library) -> None:
    """Simple interactive menu over a loaded Library."""
    while True:
        render_menu()
        choice = Prompt.ask("Enter your choice", choices=[key for key, _, _ in MENU_ITEMS], default="2")

        if choice == "1":
            _menu_add(lib)
        elif choice == "2":
            print_list_result(lib.list_books())
        elif choice == "3":
            _menu_status(lib, True)
        elif choice == "4":
            _menu_status(lib, False)
        elif choice == "5":
            _menu_delete(lib)
        elif choice == "6":
            console.print("[green]Goodbye![/]")
            break
        print()  # blank line between operations


if __name__ == "__main__":
    if len(sys.argv) > 1:
        app()
    else:
        logging.basicConfig(level=settings.log_level)
        run_menu(get_library())
