import logging
import os
from typing import List, Tuple

from book import Book
from codec import encode_line

logger = logging.getLogger(__name__)

# Default catalog written to a missing or empty data file, in id order.
SEED_BOOKS: List[Tuple[str, str]] = [
    ("Harry Potter and the Sorcerer’s Stone", "JK Rowling"),
    ("Harry Potter and the Chamber of Secrets", "JK Rowling"),
    ("Harry Potter and the Goblet of Fire", "JK Rowling"),
    ("Don Quixote", "Miguel de Cervantes"),
    ("The Hobbit", "J.R.R. Tolkien"),
    ("Wuthering Heights", "Emily Bronte"),
    ("The Lord of The Rings", "J.R.R. Tolkien"),
    ("Good Omens", "Neil Gaiman"),
    ("Coraline", "Neil Gaiman"),
    ("The Giver", "Lois Lowry"),
    ("Number the Stars", "Lois Lowry"),
    ("The Great Gatsby", "F. Scott Fitzgerald"),
    ("To Kill A Mockingbird", "Harper Lee"),
    ("The Hunger Games", "Suzanne Collins"),
    ("Catching Fire", "Suzanne Collins"),
    ("Game of Thrones", "George R. R. Martin"),
    ("The Wild Robot", "Peter Brown"),
    ("The Lightning Thief", "Rick Riordan"),
    ("The Last Olympian", "Rick Riordan"),
]


def file_is_empty(path: str) -> bool:
    """True when the file is missing or exactly zero bytes long."""
    try:
        return os.path.getsize(path) == 0
    except OSError:
        return True


def seed_books() -> List[Book]:
    return [Book(i, title, author) for i, (title, author) in enumerate(SEED_BOOKS, 1)]


def seed_if_empty(path: str) -> bool:
    """Write the default catalog to ``path`` if it is missing or empty.

    Only the file is touched; callers read it back with ``Library.load``.
    Returns True when the file was seeded.
    """
    if not file_is_empty(path):
        return False

    books = seed_books()
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            for book in books:
                f.write(encode_line(book) + "\n")
    except OSError as e:
        logger.error(f"Could not open {path} for seeding: {e}")
        return False

    logger.info(f"Seeded initial library with {len(books)} books.")
    return True
