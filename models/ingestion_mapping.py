"""Mapping logic from raw product metadata to :class:`ClothingItem`."""

from __future__ import annotations

import logging
import re
import uuid
from typing import Dict, List, Optional, Tuple

from models.clothing_item import ClothingItem
from models.taxonomy import MULTI_COLOR

logger = logging.getLogger(__name__)

# Checked in order; the first matching category wins and tops is the fallback.
_CATEGORY_RULES: List[Tuple[str, str, str]] = [
    ("dresses", r"\b(dress|gown|sundress|maxi|mini)\b", "elegant"),
    ("shoes", r"\b(shoe|sneaker|boot|heel|sandal|loafer|oxford)s?\b", "casual"),
    ("outerwear", r"\b(jacket|coat|blazer|cardigan|hoodie)s?\b", "casual"),
    ("bottoms", r"\b(jean|pant|trouser|short|skirt|legging)s?\b", "casual"),
    (
        "accessories",
        r"\b(bag|purse|wallet|backpack|handbag|jewelry|necklace|earring|bracelet|watch|hat|cap|scarf|belt)s?\b",
        "trendy",
    ),
]

_TYPE_KEYWORDS: Dict[str, List[Tuple[str, str]]] = {
    "shoes": [("sneaker", "sneakers"), ("boot", "boots"), ("heel", "heels"), ("sandal", "sandals")],
    "outerwear": [("jacket", "jacket"), ("coat", "coat"), ("cardigan", "cardigan")],
    "bottoms": [
        ("jean", "jeans"),
        ("pant", "pants"),
        ("trouser", "pants"),
        ("short", "shorts"),
        ("skirt", "skirt"),
        ("legging", "leggings"),
    ],
    "tops": [
        ("t-shirt", "t-shirt"),
        ("tee", "t-shirt"),
        ("shirt", "shirt"),
        ("blouse", "blouse"),
        ("sweater", "sweater"),
        ("tank", "tank-top"),
        ("hoodie", "hoodie"),
    ],
}

_CATEGORY_SINGULAR: Dict[str, str] = {
    "tops": "top",
    "bottoms": "bottom",
    "dresses": "dress",
    "outerwear": "outerwear",
    "shoes": "shoe",
    "accessories": "accessory",
}

_COLOR_KEYWORDS: List[Tuple[str, str]] = [
    ("red", "red"),
    ("pink", "pink"),
    ("rose", "pink"),
    ("blue", "blue"),
    ("navy", "navy"),
    ("royal", "blue"),
    ("green", "green"),
    ("olive", "green"),
    ("yellow", "yellow"),
    ("gold", "yellow"),
    ("orange", "orange"),
    ("purple", "purple"),
    ("violet", "purple"),
    ("brown", "brown"),
    ("tan", "brown"),
    ("beige", "beige"),
    ("cream", "beige"),
    ("black", "black"),
    ("white", "white"),
    ("gray", "gray"),
    ("grey", "gray"),
    ("silver", "gray"),
]


def _match_type(category: str, text: str) -> Optional[str]:
    keywords = _TYPE_KEYWORDS.get(category)
    if keywords is None:
        return None
    for keyword, item_type in keywords:
        if keyword in text:
            return item_type
    return "other"


def categorize_clothing(title: str, description: str = "") -> Dict[str, Optional[str]]:
    """Guess category, type and style from product text."""

    text = f"{title} {description}".lower()
    for category, pattern, style in _CATEGORY_RULES:
        if re.search(pattern, text):
            item_type = "dress" if category == "dresses" else _match_type(category, text)
            logger.debug("Matched category %s (type=%s) from text", category, item_type)
            return {"category": category, "item_type": item_type, "style": style}
    return {"category": "tops", "item_type": _match_type("tops", text), "style": "casual"}


def extract_colors_from_text(text: str) -> List[str]:
    """Return color families mentioned in ``text``, or ``["multi"]`` if none."""

    lower_text = text.lower()
    found: List[str] = []
    for keyword, color in _COLOR_KEYWORDS:
        if keyword in lower_text and color not in found:
            found.append(color)
    return found or [MULTI_COLOR]


def infer_seasons(category: str, item_type: Optional[str] = None, description: str = "") -> List[str]:
    text = description.lower()
    if any(word in text for word in ("winter", "warm", "wool", "fleece")):
        return ["winter"]
    if any(word in text for word in ("summer", "light", "cotton", "linen")):
        return ["summer"]

    if category == "outerwear":
        if item_type in {"coat", "jacket"}:
            return ["fall", "winter"]
        if item_type == "cardigan":
            return ["spring", "fall"]
    if category == "shoes":
        if item_type == "boots":
            return ["fall", "winter"]
        if item_type == "sandals":
            return ["spring", "summer"]
    return ["all-season"]


def generate_item_name(category: str, colors: List[str], item_type: Optional[str] = None) -> str:
    if len(colors) == 1:
        color_label = colors[0]
    elif len(colors) > 1:
        color_label = "multicolor"
    else:
        color_label = ""
    type_label = item_type or _CATEGORY_SINGULAR.get(category, category)
    return f"{color_label} {type_label}".strip()


def map_raw_metadata_to_clothing_item(user_id: str, raw: Dict[str, object]) -> ClothingItem:
    """Map parsed product metadata into a fully validated :class:`ClothingItem`.

    Explicit ``category``/``colors``/``style`` values win over inferred ones.
    """

    title = str(raw.get("title") or raw.get("name") or "")
    description = str(raw.get("description") or "")
    guessed = categorize_clothing(title, description)

    category = str(raw.get("category") or guessed["category"])
    item_type = raw.get("item_type") or guessed["item_type"]
    style = str(raw.get("style") or guessed["style"])
    colors = list(raw.get("colors") or []) or extract_colors_from_text(f"{title} {description}")
    seasons = list(raw.get("seasons") or []) or infer_seasons(category, item_type, description)

    item = ClothingItem(
        item_id=str(raw.get("item_id") or uuid.uuid4()),
        user_id=user_id,
        name=title or generate_item_name(category, colors, item_type),
        category=category,
        item_type=item_type,
        colors=colors,
        primary_color=str(raw.get("primary_color") or colors[0]),
        style=style,
        seasons=seasons,
        tags=list(raw.get("tags") or []),
        image_url=raw.get("image_url"),
        brand=raw.get("brand") if isinstance(raw.get("brand"), str) else None,
        source_url=raw.get("source_url"),
    )
    logger.debug(
        "Mapped raw metadata to ClothingItem",
        extra={"category": item.category, "item_type": item.item_type, "colors": item.colors},
    )
    return item


__all__ = [
    "categorize_clothing",
    "extract_colors_from_text",
    "infer_seasons",
    "generate_item_name",
    "map_raw_metadata_to_clothing_item",
]
