import logging
from typing import List, Optional

from book import Book
from catalog import seed_if_empty
from codec import decode_line, encode_line
from config import settings
from errors import DecodeError, ValidationError

logger = logging.getLogger(__name__)


class Library:
    """Manages the collection of books and its flat-file persistence.

    The whole file is read on ``load`` and rewritten after every mutation, so
    the in-memory list and the file always hold the same records in the same
    order.
    """

    def __init__(self, data_file: Optional[str] = None) -> None:
        self.data_file = data_file or settings.data_file
        self.books: List[Book] = []

    # ------------------------- Core operations ------------------------- #
    def add_book(self, title: str, author: str) -> Book:
        """Create a book with the next free id, append it and persist."""
        if title == "":
            raise ValidationError("Title cannot be empty.")
        if author == "":
            raise ValidationError("Author cannot be empty.")

        book = Book(self.next_id(), title, author)
        self.books.append(book)
        self.rewrite()
        return book

    def list_books(self) -> List[Book]:
        return list(self.books)

    def find_book(self, book_id: int) -> Optional[Book]:
        for book in self.books:
            if book.id == book_id:
                return book
        return None

    def set_status(self, book_id: int, checked_out: bool) -> bool:
        """Mark the first book with ``book_id`` as checked out or in. False if not found."""
        book = self.find_book(book_id)
        if book is None:
            return False

        if checked_out:
            book.check_out()
        else:
            book.check_in()
        self.rewrite()
        return True

    def check_out(self, book_id: int) -> bool:
        return self.set_status(book_id, True)

    def check_in(self, book_id: int) -> bool:
        return self.set_status(book_id, False)

    def delete_by_id(self, book_id: int) -> bool:
        """Remove every book carrying ``book_id``. False if none matched."""
        survivors = [b for b in self.books if b.id != book_id]
        if len(survivors) == len(self.books):
            return False

        self.books = survivors
        self.rewrite()
        return True

    def next_id(self) -> int:
        return max((b.id for b in self.books), default=0) + 1

    # ------------------------- Persistence ------------------------- #
    def load(self) -> List[Book]:
        """Read the data file into memory, seeding it first if missing or empty."""
        seed_if_empty(self.data_file)

        books: List[Book] = []
        try:
            # Non-UTF-8 bytes round-trip through rewrite unchanged
            with open(self.data_file, "r", encoding="utf-8", errors="surrogateescape") as f:
                for line in f:
                    if not line.strip("\r\n"):
                        continue
                    result = decode_line(line)
                    if isinstance(result, DecodeError):
                        logger.warning(f"Skipping invalid line in {self.data_file}: {result}")
                        continue
                    books.append(result)
        except OSError as e:
            logger.error(f"Could not read {self.data_file}: {e}")

        self.books = books
        return list(self.books)

    def rewrite(self) -> bool:
        """Overwrite the data file with the in-memory collection.

        A failed write is logged and otherwise ignored; the in-memory list stays
        authoritative until the next successful rewrite.
        """
        try:
            with open(self.data_file, "w", encoding="utf-8", errors="surrogateescape", newline="\n") as f:
                for book in self.books:
                    f.write(encode_line(book) + "\n")
        except OSError as e:
            logger.error(f"Could not open {self.data_file} for writing: {e}")
            return False
        return True
