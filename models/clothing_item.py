"""Clothing item data model and helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from models.taxonomy import (
    MULTI_COLOR,
    is_color_family,
    normalise_tags,
    normalize_color_name,
    validate_category,
    validate_season,
    validate_style,
)


def _ensure_list(value: Any) -> List[Any]:
    """Coerce a scalar or iterable into a list."""

    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return [value]


def _normalise_colors(values: Iterable[str]) -> List[str]:
    """Normalise color names and reject anything outside the color families."""

    normalised = []
    seen = set()
    for value in values:
        key = normalize_color_name(str(value))
        if not key:
            continue
        if not is_color_family(key):
            raise ValueError(f"Unsupported color '{value}'")
        if key not in seen:
            normalised.append(key)
            seen.add(key)
    return normalised


def _coerce_datetime(value: Any) -> datetime:
    if value is None or value == "":
        return datetime.now(timezone.utc)
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass
class ClothingItem:
    """Represents one entry of a user's wardrobe."""

    item_id: str
    user_id: str
    category: str
    primary_color: str
    style: str
    name: str = ""
    item_type: Optional[str] = None
    colors: List[str] = field(default_factory=list)
    seasons: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    wear_count: int = 0
    is_favorite: bool = False
    date_added: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    image_url: Optional[str] = None
    brand: Optional[str] = None
    source_url: Optional[str] = None
    last_worn: Optional[datetime] = None
    notes: Optional[str] = None

    def __post_init__(self) -> None:
        self.item_id = str(self.item_id)
        self.category = validate_category(self.category)
        self.style = validate_style(self.style)
        self.colors = _normalise_colors(_ensure_list(self.colors))
        primary = normalize_color_name(self.primary_color)
        if not is_color_family(primary):
            raise ValueError(f"Unsupported primary color '{self.primary_color}'")
        if not self.colors:
            self.colors = [primary]
        if primary != MULTI_COLOR and primary not in self.colors:
            raise ValueError(
                f"Primary color '{primary}' must be one of the item colors {self.colors} or '{MULTI_COLOR}'"
            )
        self.primary_color = primary

        seasons: List[str] = []
        for season in _ensure_list(self.seasons):
            key = validate_season(season)
            if key not in seasons:
                seasons.append(key)
        self.seasons = seasons
        self.tags = normalise_tags(_ensure_list(self.tags))

        self.wear_count = int(self.wear_count)
        if self.wear_count < 0:
            raise ValueError("wear_count cannot be negative")
        self.is_favorite = bool(self.is_favorite)
        self.date_added = _coerce_datetime(self.date_added)
        if self.last_worn is not None:
            self.last_worn = _coerce_datetime(self.last_worn)

    def days_since_added(self, now: Optional[datetime] = None) -> float:
        reference = _coerce_datetime(now) if now is not None else datetime.now(timezone.utc)
        return (reference - self.date_added).total_seconds() / 86400

    def to_dict(self) -> Dict[str, Any]:
        return {
            "item_id": self.item_id,
            "user_id": self.user_id,
            "name": self.name,
            "category": self.category,
            "item_type": self.item_type,
            "colors": list(self.colors),
            "primary_color": self.primary_color,
            "style": self.style,
            "seasons": list(self.seasons),
            "tags": list(self.tags),
            "wear_count": self.wear_count,
            "is_favorite": self.is_favorite,
            "date_added": self.date_added.isoformat(),
            "image_url": self.image_url,
            "brand": self.brand,
            "source_url": self.source_url,
            "last_worn": self.last_worn.isoformat() if self.last_worn else None,
            "notes": self.notes,
        }


_FIELD_ALIASES = {
    "id": "item_id",
    "itemId": "item_id",
    "userId": "user_id",
    "type": "item_type",
    "itemType": "item_type",
    "primaryColor": "primary_color",
    "season": "seasons",
    "wearCount": "wear_count",
    "isFavorite": "is_favorite",
    "dateAdded": "date_added",
    "imageUrl": "image_url",
    "sourceUrl": "source_url",
    "lastWorn": "last_worn",
}


def from_raw_metadata(metadata: Dict[str, Any]) -> ClothingItem:
    """Factory to build a :class:`ClothingItem` from loose catalog records.

    Accepts both snake_case and the camelCase keys used by the web client.
    """

    data = {_FIELD_ALIASES.get(key, key): value for key, value in metadata.items()}
    required_fields = ["item_id", "user_id", "category", "style"]
    missing = [name for name in required_fields if not data.get(name)]
    if missing:
        raise ValueError(f"Missing required fields for ClothingItem: {missing}")

    colors = _ensure_list(data.get("colors"))
    primary_color = data.get("primary_color") or (colors[0] if colors else MULTI_COLOR)

    return ClothingItem(
        item_id=str(data["item_id"]),
        user_id=str(data["user_id"]),
        name=str(data.get("name") or ""),
        category=str(data["category"]),
        item_type=data.get("item_type"),
        colors=colors,
        primary_color=str(primary_color),
        style=str(data["style"]),
        seasons=_ensure_list(data.get("seasons")),
        tags=_ensure_list(data.get("tags")),
        wear_count=int(data.get("wear_count") or 0),
        is_favorite=bool(data.get("is_favorite", False)),
        date_added=data.get("date_added"),
        image_url=data.get("image_url"),
        brand=data.get("brand"),
        source_url=data.get("source_url"),
        last_worn=data.get("last_worn"),
        notes=data.get("notes"),
    )


__all__ = ["ClothingItem", "from_raw_metadata"]
