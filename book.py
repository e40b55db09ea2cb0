from __future__ import annotations


class Book:
    """Represents a single book entry in the catalog."""

    def __init__(self, book_id: int, title: str, author: str, checked_out: bool = False) -> None:
        self._id = book_id
        self.title = title
        self.author = author
        self.checked_out = checked_out

    @property
    def id(self) -> int:
        return self._id

    @property
    def status_label(self) -> str:
        return "Checked Out" if self.checked_out else "Available"

    def check_out(self) -> None:
        self.checked_out = True

    def check_in(self) -> None:
        self.checked_out = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return (self.id, self.title, self.author, self.checked_out) == (
            other.id, other.title, other.author, other.checked_out
        )

    def __repr__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"Book(id={self.id!r}, title={self.title!r}, author={self.author!r}, checked_out={self.checked_out!r})"

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self.title} by {self.author} (ID: {self.id})"

    def to_dict(self) -> dict:
        return {"id": self.id, "title": self.title, "author": self.author, "checked_out": self.checked_out}

    @staticmethod
    def from_dict(data: dict) -> "Book":
        return Book(
            book_id=int(data["id"]),
            title=data["title"],
            author=data["author"],
            checked_out=bool(data.get("checked_out", False)),
        )
