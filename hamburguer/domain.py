"""Domain entities and the ports the use cases depend on."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Protocol

from hamburguer.dto import Function, ReviewInput, Tool


def _text(value: Any) -> str:
    if value is None:
        return ""
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


@dataclass(frozen=True)
class Item:
    """A menu item with its price."""

    id: int = 0
    name: str = ""
    price: float = 0.0
    inserted_at: str = ""

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Item":
        """Build an item from a database row mapping."""
        return cls(
            id=int(row.get("id") or 0),
            name=row.get("name") or "",
            price=float(row.get("price") or 0),
            inserted_at=_text(row.get("inserted_at")),
        )


@dataclass(frozen=True)
class Review:
    """A stored participant review."""

    id: int = 0
    name: str = ""
    description: str = ""
    inserted_at: str = ""

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Review":
        """Build a review from a database row mapping."""
        return cls(
            id=int(row.get("id") or 0),
            name=row.get("name") or "",
            description=row.get("description") or "",
            inserted_at=_text(row.get("inserted_at")),
        )


class ItemScraperGateway(Protocol):
    def scrape_items(self) -> list[Item]:
        """Collect the items currently on the menu."""
        ...


class ItemDatabaseRepository(Protocol):
    def save(self, item: Item) -> Item:
        """Store an item and return it as stored."""
        ...

    def fetch_all_from_last_sync(self) -> list[Item]:
        """Return the items stored during the last day."""
        ...


class ItemLLMGateway(Protocol):
    def generate_recommendation(self, tools: list[Tool], items: list[Item]) -> list[Function]:
        """Ask the model for an order and return the functions it called."""
        ...


class ReviewDatabaseRepository(Protocol):
    def fetch(self) -> list[Review]:
        """Return every stored review."""
        ...

    def save(self, review: ReviewInput) -> None:
        """Store a review."""
        ...

    def count(self) -> int:
        """Return the number of stored reviews."""
        ...


class ReviewLLMGateway(Protocol):
    def get_top3_reviews(self, reviews: list[Review]) -> str:
        """Ask the model to pick and announce the best reviews."""
        ...