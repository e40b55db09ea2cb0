import os
import json
from typing import List
from rich.console import Console
from rich.table import Table

from book import Book

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

_console = Console()


def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode


def get_output_mode() -> str:
    return os.environ.get(OUTPUT_MODE_ENV, "plain").lower()


def format_book_line(book: Book) -> str:
    return f"Book ID: {book.id} | Title: {book.title} | Author: {book.author} | Status: {book.status_label}"


def print_list_result(books: List[Book]) -> None:
    """Print the book list in the current output mode.
    - plain: one 'Book ID: .. | Title: .. | Author: .. | Status: ..' line per book
    - json: array of book dicts
    - rich: Rich table
    """
    mode = get_output_mode()

    if not books:
        print("No books in the library yet.")
        return

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="📚 Books", show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True, justify="right")
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("Status")
        for b in books:
            status = "[red]Checked Out[/]" if b.checked_out else "[green]Available[/]"
            table.add_row(str(b.id), b.title, b.author, status)
        _console.print(table)
    else:
        print("Books in the library:")
        for b in books:
            print(format_book_line(b))
