"""Outfit recommendation engine.

Orchestrates filtering, combination generation, scoring, ranking and
de-duplication. Everything here is a pure function of its inputs: the same
wardrobe snapshot, occasion and options always yield the same ordered list.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Sequence

from pydantic import BaseModel, Field, field_validator

from logic.combination_generator import (
    DEFAULT_MAX_COMBINATIONS,
    DEFAULT_MAX_ITEMS_PER_CATEGORY,
    OUTFIT_SKELETONS,
    SKELETON_WEIGHT_IN_SCORE,
    generate_combinations,
    group_items_by_category,
)
from logic.outfit_scoring import score_outfit
from models.clothing_item import ClothingItem
from models.outfit import OutfitRecommendation
from models.taxonomy import ALL_SEASON, normalize_color_name, validate_occasion, validate_season

logger = logging.getLogger(__name__)

DEFAULT_MAX_RECOMMENDATIONS = 10
DEFAULT_MAX_SUGGESTIONS = 3
RECENTLY_ADDED_DAYS = 7


class RecommendationOptions(BaseModel):
    """Optional filters and limits for :func:`generate_outfit_recommendations`."""

    season: Optional[str] = None
    preferred_colors: List[str] = Field(default_factory=list)
    exclude_item_ids: List[str] = Field(default_factory=list)
    include_item_ids: List[str] = Field(default_factory=list)
    max_recommendations: int = Field(DEFAULT_MAX_RECOMMENDATIONS, ge=0)
    max_items_per_category: int = Field(DEFAULT_MAX_ITEMS_PER_CATEGORY, ge=1)
    max_combinations_per_skeleton: int = Field(DEFAULT_MAX_COMBINATIONS, ge=1)

    @field_validator("season")
    @classmethod
    def _validate_season(cls, season: Optional[str]) -> Optional[str]:
        return validate_season(season) if season else None

    @field_validator("preferred_colors")
    @classmethod
    def _normalise_colors(cls, colors: List[str]) -> List[str]:
        return [normalize_color_name(color) for color in colors]


def filter_by_season(items: Iterable[ClothingItem], season: Optional[str]) -> List[ClothingItem]:
    if not season:
        return list(items)
    return [item for item in items if season in item.seasons or ALL_SEASON in item.seasons]


def _outfit_key(outfit: OutfitRecommendation) -> tuple:
    return tuple(sorted(outfit.item_ids))


def generate_outfit_recommendations(
    wardrobe: Sequence[ClothingItem],
    occasion: str,
    options: Optional[RecommendationOptions] = None,
) -> List[OutfitRecommendation]:
    """Return ranked, de-duplicated outfit recommendations for ``occasion``.

    An empty list is a normal outcome: empty wardrobe, no satisfiable outfit
    shape, or no combination containing every requested include item.
    """

    occasion = validate_occasion(occasion)
    options = options or RecommendationOptions()

    excluded = set(options.exclude_item_ids)
    available = [item for item in wardrobe if item.item_id not in excluded]
    available = filter_by_season(available, options.season)

    include_ids = set(options.include_item_ids)
    # Resolved against the full wardrobe so unknown ids are simply ignored.
    required_ids = {item.item_id for item in wardrobe if item.item_id in include_ids}

    grouped = group_items_by_category(available)
    combinations = []
    for skeleton in OUTFIT_SKELETONS:
        for combo in generate_combinations(
            grouped,
            skeleton,
            max_combinations=options.max_combinations_per_skeleton,
            max_items_per_category=options.max_items_per_category,
        ):
            if required_ids and not required_ids.issubset(item.item_id for item in combo):
                continue
            combinations.append((skeleton, combo))

    scored: List[OutfitRecommendation] = []
    for skeleton, combo in combinations:
        outfit = score_outfit(combo, occasion, options.preferred_colors)
        if SKELETON_WEIGHT_IN_SCORE:
            outfit.confidence *= skeleton.weight
        scored.append(outfit)

    # sorted() is stable: ties keep generation order.
    ranked = sorted(scored, key=lambda outfit: outfit.confidence, reverse=True)

    unique: List[OutfitRecommendation] = []
    seen = set()
    for outfit in ranked:
        if len(unique) >= options.max_recommendations:
            break
        key = _outfit_key(outfit)
        if key in seen:
            continue
        seen.add(key)
        unique.append(outfit)

    logger.info(
        "Generated %s recommendations for occasion=%s from %s items (%s candidates)",
        len(unique),
        occasion,
        len(available),
        len(scored),
    )
    return unique


def wardrobe_priority(item: ClothingItem, now: datetime) -> int:
    recent_bonus = 5 if item.days_since_added(now) < RECENTLY_ADDED_DAYS else 0
    favorite_bonus = 3 if item.is_favorite else 0
    return (10 - item.wear_count) + recent_bonus + favorite_bonus


def prioritize_wardrobe(wardrobe: Sequence[ClothingItem], now: Optional[datetime] = None) -> List[ClothingItem]:
    """Order items by freshness priority, highest first; ties keep wardrobe order."""

    reference = now or datetime.now(timezone.utc)
    return sorted(wardrobe, key=lambda item: wardrobe_priority(item, reference), reverse=True)


def get_quick_outfit_suggestions(
    wardrobe: Sequence[ClothingItem],
    occasion: str,
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
    now: Optional[datetime] = None,
    options: Optional[RecommendationOptions] = None,
) -> List[OutfitRecommendation]:
    """Recommend from a wardrobe biased towards fresh, new and favorite items.

    The priority order only changes which items survive the per-category
    cap; scoring is unchanged. Caps from ``options`` are honoured but its
    filters are not applied.
    """

    base = options or RecommendationOptions()
    quick_options = RecommendationOptions(
        max_recommendations=max_suggestions,
        max_items_per_category=base.max_items_per_category,
        max_combinations_per_skeleton=base.max_combinations_per_skeleton,
    )
    return generate_outfit_recommendations(prioritize_wardrobe(wardrobe, now), occasion, quick_options)


__all__ = [
    "RecommendationOptions",
    "filter_by_season",
    "generate_outfit_recommendations",
    "get_quick_outfit_suggestions",
    "prioritize_wardrobe",
    "wardrobe_priority",
]
