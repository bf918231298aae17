"""SQL repositories for menu items and reviews."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from sqlalchemy import DateTime, bindparam, text
from sqlalchemy.engine import Engine

from hamburguer.domain import Item, Review
from hamburguer.dto import ReviewInput

_SYNC_WINDOW = timedelta(days=1)

_FETCH_RECENT_ITEMS = text(
    "SELECT id, name, price, inserted_at FROM item WHERE inserted_at > :cutoff"
).bindparams(bindparam("cutoff", type_=DateTime()))

_INSERT_ITEM = text(
    "INSERT INTO item (name, price) VALUES (:name, :price) "
    "RETURNING id, name, price, inserted_at"
)

_COUNT_REVIEWS = text("SELECT COUNT(id) FROM review")
_FETCH_REVIEWS = text("SELECT * FROM review")
_INSERT_REVIEW = text("INSERT INTO review (name, description) VALUES (:name, :description)")


class ItemDatabase:
    """Stores scraped menu items."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def save(self, item: Item) -> Item:
        """Insert *item* and return the stored row."""
        with self.engine.begin() as conn:
            row = conn.execute(
                _INSERT_ITEM, {"name": item.name, "price": item.price}
            ).mappings().one()
            return Item.from_row(row)

    def fetch_all_from_last_sync(self) -> list[Item]:
        """Return the items inserted during the last day."""
        cutoff = datetime.now(timezone.utc).replace(tzinfo=None) - _SYNC_WINDOW
        with self.engine.connect() as conn:
            rows = conn.execute(_FETCH_RECENT_ITEMS, {"cutoff": cutoff}).mappings()
            return [Item.from_row(row) for row in rows]


class ReviewDatabase:
    """Stores participant reviews."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def fetch(self) -> list[Review]:
        with self.engine.connect() as conn:
            return [Review.from_row(row) for row in conn.execute(_FETCH_REVIEWS).mappings()]

    def save(self, review: ReviewInput) -> None:
        with self.engine.begin() as conn:
            conn.execute(_INSERT_REVIEW, {"name": review.name, "description": review.description})

    def count(self) -> int:
        with self.engine.connect() as conn:
            return int(conn.execute(_COUNT_REVIEWS).scalar_one())