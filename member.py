from __future__ import annotations


class Member:
    """A registered library member."""

    def __init__(self, name: str, id: int = 0) -> None:
        self.id = id
        self.name = name.strip()

    def __str__(self) -> str:
        return f"{self.id}: {self.name}"

    def __repr__(self) -> str:
        return f"Member(id={self.id!r}, name={self.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Member):
            return NotImplemented
        return (self.id, self.name) == (other.id, other.name)

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}

    @staticmethod
    def from_dict(data: dict) -> "Member":
        return Member(name=data["name"], id=data.get("id", 0))
