"""Sample wardrobe used to bootstrap demo users."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional, Sequence

from models.clothing_item import ClothingItem

SAMPLE_CLOTHING_ITEMS: List[Dict[str, object]] = [
    {
        "name": "Classic White Button-Down Shirt",
        "category": "tops",
        "item_type": "shirt",
        "image_url": "https://images.unsplash.com/photo-1596755094514-f87e34085b2c?w=400",
        "colors": ["white"],
        "primary_color": "white",
        "style": "business",
        "seasons": ["spring", "summer", "fall", "winter"],
        "tags": ["professional", "versatile", "classic"],
        "brand": "Sample Brand",
    },
    {
        "name": "Dark Wash Straight Jeans",
        "category": "bottoms",
        "item_type": "jeans",
        "image_url": "https://images.unsplash.com/photo-1542272604-787c3835535d?w=400",
        "colors": ["blue"],
        "primary_color": "blue",
        "style": "casual",
        "seasons": ["spring", "fall", "winter"],
        "tags": ["denim", "comfortable", "everyday"],
        "brand": "Sample Denim Co.",
    },
    {
        "name": "Little Black Dress",
        "category": "dresses",
        "item_type": "cocktail",
        "image_url": "https://images.unsplash.com/photo-1566479179817-c62b8ed2b518?w=400",
        "colors": ["black"],
        "primary_color": "black",
        "style": "elegant",
        "seasons": ["spring", "summer", "fall"],
        "tags": ["formal", "versatile", "timeless"],
        "brand": "Elegant Designs",
    },
    {
        "name": "Navy Blazer",
        "category": "outerwear",
        "item_type": "blazer",
        "image_url": "https://images.unsplash.com/photo-1594633312681-425c7b97ccd1?w=400",
        "colors": ["navy"],
        "primary_color": "navy",
        "style": "business",
        "seasons": ["spring", "fall", "winter"],
        "tags": ["professional", "structured", "classic"],
        "brand": "Professional Wear",
    },
    {
        "name": "White Sneakers",
        "category": "shoes",
        "item_type": "sneakers",
        "image_url": "https://images.unsplash.com/photo-1549298916-b41d501d3772?w=400",
        "colors": ["white"],
        "primary_color": "white",
        "style": "casual",
        "seasons": ["spring", "summer", "fall"],
        "tags": ["comfortable", "versatile", "athletic"],
        "brand": "Comfort Steps",
    },
    {
        "name": "Striped T-Shirt",
        "category": "tops",
        "item_type": "t-shirt",
        "image_url": "https://images.unsplash.com/photo-1521572163474-6864f9cf17ab?w=400",
        "colors": ["white", "navy"],
        "primary_color": "white",
        "style": "casual",
        "seasons": ["spring", "summer"],
        "tags": ["stripes", "casual", "comfortable"],
        "brand": "Casual Classics",
    },
]

FAVORITE_SEED_COUNT = 2


def create_seed_items(
    user_id: str,
    now: Optional[datetime] = None,
    wear_counts: Optional[Sequence[int]] = None,
) -> List[ClothingItem]:
    """Build the sample wardrobe for ``user_id``.

    Items are added one day apart, newest first, and the first two are
    favorites. Wear counts default to ``index % 5``.
    """

    reference = now or datetime.now(timezone.utc)
    items = []
    for index, sample in enumerate(SAMPLE_CLOTHING_ITEMS):
        wear_count = wear_counts[index] if wear_counts is not None else index % 5
        items.append(
            ClothingItem(
                item_id=f"{user_id}-seed-{index + 1}",
                user_id=user_id,
                date_added=reference - timedelta(days=index),
                wear_count=wear_count,
                is_favorite=index < FAVORITE_SEED_COUNT,
                **sample,
            )
        )
    return items


__all__ = ["SAMPLE_CLOTHING_ITEMS", "create_seed_items"]
