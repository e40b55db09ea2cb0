"""Line codec for the catalog file.

Each record is one line: ``<id>, <title>, <author>, <Yes|No>``. Fields are
not escaped, so a title or author holding a comma will not survive a reload.
"""
from __future__ import annotations

from typing import Union

from book import Book
from errors import DecodeError

FIELD_SEPARATOR = ", "
STATUS_YES = "Yes"
STATUS_NO = "No"
_FIELD_COUNT = 4
_TRIM_CHARS = " \t"


def encode_line(book: Book) -> str:
    status = STATUS_YES if book.checked_out else STATUS_NO
    return FIELD_SEPARATOR.join((str(book.id), book.title, book.author, status))


def decode_line(line: str) -> Union[Book, DecodeError]:
    """Parse one stored line into a Book, or return a DecodeError describing why not.

    Ids must be positive and title/author non-empty. Any status token other
    than exactly ``Yes`` reads as not checked out.
    """
    parts = [part.strip(_TRIM_CHARS) for part in line.rstrip("\r\n").split(",")]
    if len(parts) != _FIELD_COUNT:
        return DecodeError(line, f"expected {_FIELD_COUNT} fields, got {len(parts)}")

    raw_id, title, author, status = parts
    if not _is_int_literal(raw_id):
        return DecodeError(line, f"invalid id {raw_id!r}")
    if int(raw_id) < 1:
        return DecodeError(line, f"non-positive id {raw_id!r}")
    if not title or not author:
        return DecodeError(line, "empty title or author")

    return Book(int(raw_id), title, author, checked_out=(status == STATUS_YES))


def _is_int_literal(text: str) -> bool:
    digits = text[1:] if text.startswith("-") else text
    return digits.isascii() and digits.isdigit()
