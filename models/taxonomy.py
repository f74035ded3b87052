"""Canonical taxonomy definitions for wardrobe items.

This module centralises the closed label sets used across the recommendation
engine: clothing categories, color families, style types, seasons and
occasions. Helper functions keep validation logic consistent between the
data model, the ingestion helpers and the HTTP layer.
"""

from typing import Dict, Iterable, List


class InvalidCategory(ValueError):
    """Raised when an item category is outside the fixed category set."""


class InvalidOccasion(ValueError):
    """Raised when an occasion is not part of the supported occasions."""


class InvalidStyle(ValueError):
    """Raised when a style tag is not part of the supported styles."""


class InvalidSeason(ValueError):
    """Raised when a season tag is not part of the supported seasons."""


def _normalize_key(value: str) -> str:
    """Normalise a free-form string into a taxonomy key."""

    return str(value).strip().lower().replace(" ", "-").replace("_", "-")


CATEGORIES: List[str] = ["tops", "bottoms", "dresses", "outerwear", "shoes", "accessories"]

COLOR_FAMILIES: List[str] = [
    "black",
    "white",
    "gray",
    "navy",
    "blue",
    "red",
    "green",
    "yellow",
    "orange",
    "purple",
    "pink",
    "brown",
    "beige",
    "multi",
]

STYLE_TYPES: List[str] = ["casual", "business", "elegant", "sporty", "trendy"]
SEASONS: List[str] = ["spring", "summer", "fall", "winter", "all-season"]
OCCASIONS: List[str] = ["casual", "work", "date", "formal", "party"]

MULTI_COLOR = "multi"
ALL_SEASON = "all-season"

_CATEGORY_ALIASES: Dict[str, str] = {
    "top": "tops",
    "bottom": "bottoms",
    "dress": "dresses",
    "shoe": "shoes",
    "accessory": "accessories",
}

_SEASON_ALIASES: Dict[str, str] = {
    "autumn": "fall",
    "all-year": "all-season",
    "allseason": "all-season",
}

COLOR_MAP: Dict[str, str] = {
    "navy-blue": "navy",
    "light-blue": "blue",
    "sky-blue": "blue",
    "royal-blue": "blue",
    "off-white": "white",
    "ivory": "white",
    "cream": "beige",
    "tan": "beige",
    "khaki": "beige",
    "camel": "brown",
    "grey": "gray",
    "charcoal": "gray",
    "silver": "gray",
    "olive": "green",
    "burgundy": "red",
    "maroon": "red",
    "rose": "pink",
    "violet": "purple",
    "lavender": "purple",
    "gold": "yellow",
    "multicolor": "multi",
    "multi-color": "multi",
}


def validate_category(value: str) -> str:
    """Validate and normalise a category value.

    Raises :class:`InvalidCategory` if the category is not part of the
    canonical taxonomy.
    """

    key = _normalize_key(value)
    key = _CATEGORY_ALIASES.get(key, key)
    if key not in CATEGORIES:
        raise InvalidCategory(f"Unsupported category '{value}'. Allowed: {CATEGORIES}")
    return key


def validate_occasion(value: str) -> str:
    key = _normalize_key(value)
    if key not in OCCASIONS:
        raise InvalidOccasion(f"Unsupported occasion '{value}'. Allowed: {OCCASIONS}")
    return key


def validate_style(value: str) -> str:
    key = _normalize_key(value)
    if key not in STYLE_TYPES:
        raise InvalidStyle(f"Unsupported style '{value}'. Allowed: {STYLE_TYPES}")
    return key


def validate_season(value: str) -> str:
    key = _normalize_key(value)
    key = _SEASON_ALIASES.get(key, key)
    if key not in SEASONS:
        raise InvalidSeason(f"Unsupported season '{value}'. Allowed: {SEASONS}")
    return key


def normalize_color_name(raw_string: str) -> str:
    """Map a raw color string to a canonical color family name.

    Unknown colors are returned in normalised form so callers can decide
    whether to reject them.
    """

    key = _normalize_key(raw_string)
    return COLOR_MAP.get(key, key)


def is_color_family(value: str) -> bool:
    return value in COLOR_FAMILIES


def normalise_tags(values: Iterable[str]) -> List[str]:
    """Lower-case and deduplicate free-text tags preserving first-seen order."""

    normalised = []
    seen = set()
    for value in values:
        key = str(value).strip().lower()
        if key and key not in seen:
            normalised.append(key)
            seen.add(key)
    return normalised


__all__ = [
    "CATEGORIES",
    "COLOR_FAMILIES",
    "STYLE_TYPES",
    "SEASONS",
    "OCCASIONS",
    "MULTI_COLOR",
    "ALL_SEASON",
    "COLOR_MAP",
    "InvalidCategory",
    "InvalidOccasion",
    "InvalidStyle",
    "InvalidSeason",
    "validate_category",
    "validate_occasion",
    "validate_style",
    "validate_season",
    "normalize_color_name",
    "is_color_family",
    "normalise_tags",
]
