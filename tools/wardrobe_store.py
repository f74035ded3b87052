"""Wardrobe storage abstractions with in-memory and SQLite implementations."""
from __future__ import annotations

import json
import sqlite3
from dataclasses import asdict, replace
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

from models.clothing_item import ClothingItem

_IMMUTABLE_FIELDS = {"user_id", "item_id"}


def _newest_first(items: List[ClothingItem]) -> List[ClothingItem]:
    return sorted(items, key=lambda item: (-item.date_added.timestamp(), item.item_id))


class WardrobeStore:
    """Persistence interface for clothing items."""

    def create_item(self, item: ClothingItem) -> ClothingItem:
        raise NotImplementedError

    def get_item(self, user_id: str, item_id: str) -> Optional[ClothingItem]:
        raise NotImplementedError

    def list_items_for_user(self, user_id: str) -> List[ClothingItem]:
        raise NotImplementedError

    def delete_item(self, user_id: str, item_id: str) -> bool:
        raise NotImplementedError

    def clear_user(self, user_id: str) -> int:
        raise NotImplementedError

    def update_item(self, user_id: str, item_id: str, updated_fields: Dict[str, object]) -> Optional[ClothingItem]:
        current = self.get_item(user_id, item_id)
        if not current:
            return None
        changes = {
            key: value
            for key, value in updated_fields.items()
            if key not in _IMMUTABLE_FIELDS and hasattr(current, key)
        }
        validated = ClothingItem(**{**asdict(current), **changes})
        return self.create_item(validated)

    def record_wear(self, user_id: str, item_id: str, worn_at: Optional[datetime] = None) -> Optional[ClothingItem]:
        """Increment the wear count and stamp ``last_worn``."""

        current = self.get_item(user_id, item_id)
        if not current:
            return None
        worn = replace(
            current,
            wear_count=current.wear_count + 1,
            last_worn=worn_at or datetime.now(timezone.utc),
        )
        return self.create_item(worn)

    def toggle_favorite(self, user_id: str, item_id: str) -> Optional[ClothingItem]:
        current = self.get_item(user_id, item_id)
        if not current:
            return None
        return self.create_item(replace(current, is_favorite=not current.is_favorite))


class InMemoryWardrobeStore(WardrobeStore):
    """Process-local store used for demos and tests."""

    def __init__(self) -> None:
        self._items: Dict[str, Dict[str, ClothingItem]] = {}

    def create_item(self, item: ClothingItem) -> ClothingItem:
        self._items.setdefault(item.user_id, {})[item.item_id] = item
        return item

    def get_item(self, user_id: str, item_id: str) -> Optional[ClothingItem]:
        return self._items.get(user_id, {}).get(item_id)

    def list_items_for_user(self, user_id: str) -> List[ClothingItem]:
        return _newest_first(list(self._items.get(user_id, {}).values()))

    def delete_item(self, user_id: str, item_id: str) -> bool:
        return self._items.get(user_id, {}).pop(item_id, None) is not None

    def clear_user(self, user_id: str) -> int:
        return len(self._items.pop(user_id, {}))


class SQLiteWardrobeStore(WardrobeStore):
    """Local SQLite-backed store for clothing items."""

    def __init__(self, database_path: str | Path = "data/wardrobe.db") -> None:
        self.database_path = Path(database_path)
        if self.database_path.parent and not self.database_path.parent.exists():
            self.database_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_tables()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.database_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_tables(self) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS clothing_items (
                    user_id TEXT NOT NULL,
                    item_id TEXT NOT NULL,
                    name TEXT,
                    category TEXT NOT NULL,
                    item_type TEXT,
                    colors TEXT,
                    primary_color TEXT NOT NULL,
                    style TEXT NOT NULL,
                    seasons TEXT,
                    tags TEXT,
                    wear_count INTEGER NOT NULL DEFAULT 0,
                    is_favorite INTEGER NOT NULL DEFAULT 0,
                    date_added TEXT NOT NULL,
                    image_url TEXT,
                    brand TEXT,
                    source_url TEXT,
                    last_worn TEXT,
                    notes TEXT,
                    PRIMARY KEY (user_id, item_id)
                );
                """
            )

    @staticmethod
    def _serialise_list(values: Optional[List[object]]) -> str:
        return json.dumps(values or [])

    @staticmethod
    def _deserialise_list(raw: str) -> List[object]:
        return json.loads(raw) if raw else []

    def create_item(self, item: ClothingItem) -> ClothingItem:
        with self._connect() as conn:
            conn.execute(
                """
                INSERT OR REPLACE INTO clothing_items (
                    user_id, item_id, name, category, item_type, colors, primary_color, style,
                    seasons, tags, wear_count, is_favorite, date_added, image_url, brand,
                    source_url, last_worn, notes
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    item.user_id,
                    item.item_id,
                    item.name,
                    item.category,
                    item.item_type,
                    self._serialise_list(item.colors),
                    item.primary_color,
                    item.style,
                    self._serialise_list(item.seasons),
                    self._serialise_list(item.tags),
                    item.wear_count,
                    int(item.is_favorite),
                    item.date_added.isoformat(),
                    item.image_url,
                    item.brand,
                    item.source_url,
                    item.last_worn.isoformat() if item.last_worn else None,
                    item.notes,
                ),
            )
        return item

    def _row_to_item(self, row: sqlite3.Row) -> ClothingItem:
        return ClothingItem(
            item_id=row["item_id"],
            user_id=row["user_id"],
            name=row["name"] or "",
            category=row["category"],
            item_type=row["item_type"],
            colors=self._deserialise_list(row["colors"]),
            primary_color=row["primary_color"],
            style=row["style"],
            seasons=self._deserialise_list(row["seasons"]),
            tags=self._deserialise_list(row["tags"]),
            wear_count=row["wear_count"],
            is_favorite=bool(row["is_favorite"]),
            date_added=row["date_added"],
            image_url=row["image_url"],
            brand=row["brand"],
            source_url=row["source_url"],
            last_worn=row["last_worn"],
            notes=row["notes"],
        )

    def get_item(self, user_id: str, item_id: str) -> Optional[ClothingItem]:
        with self._connect() as conn:
            cursor = conn.execute(
                "SELECT * FROM clothing_items WHERE user_id = ? AND item_id = ?",
                (user_id, item_id),
            )
            row = cursor.fetchone()
            return self._row_to_item(row) if row else None

    def list_items_for_user(self, user_id: str) -> List[ClothingItem]:
        with self._connect() as conn:
            cursor = conn.execute("SELECT * FROM clothing_items WHERE user_id = ?", (user_id,))
            return _newest_first([self._row_to_item(row) for row in cursor.fetchall()])

    def delete_item(self, user_id: str, item_id: str) -> bool:
        with self._connect() as conn:
            cursor = conn.execute(
                "DELETE FROM clothing_items WHERE user_id = ? AND item_id = ?",
                (user_id, item_id),
            )
            return cursor.rowcount > 0

    def clear_user(self, user_id: str) -> int:
        with self._connect() as conn:
            cursor = conn.execute("DELETE FROM clothing_items WHERE user_id = ?", (user_id,))
            return cursor.rowcount


__all__ = ["WardrobeStore", "InMemoryWardrobeStore", "SQLiteWardrobeStore"]
