from __future__ import annotations


class Book:
    """Represents a single book record in the catalog."""

    def __init__(self, title: str, author: str, id: int = 0) -> None:
        self.id = id
        self.title = title.strip()
        self.author = author.strip()

    def __str__(self) -> str:
        return f"{self.id}: {self.title} - {self.author}"

    def __repr__(self) -> str:
        return f"Book(id={self.id!r}, title={self.title!r}, author={self.author!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return (self.id, self.title, self.author) == (other.id, other.title, other.author)

    def to_dict(self) -> dict:
        return {"id": self.id, "title": self.title, "author": self.author}

    @staticmethod
    def from_dict(data: dict) -> "Book":
        return Book(title=data["title"], author=data["author"], id=data.get("id", 0))
