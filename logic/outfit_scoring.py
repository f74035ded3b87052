"""Deterministic scoring for candidate outfits."""

from __future__ import annotations

from typing import Iterable, List, Optional

from models.clothing_item import ClothingItem
from models.color_theory import outfit_harmony
from models.occasion_styles import style_score
from models.outfit import OutfitRecommendation

# Style and color weights sum to 0.9; bonuses fill the remaining headroom.
WEIGHTS = {
    "style": 0.5,
    "color": 0.4,
}
COLOR_PREFERENCE_BONUS = 0.1
FRESHNESS_BONUS = 0.1
FRESHNESS_WEAR_HORIZON = 10
FAVORITE_BONUS = 0.05

FALLBACK_REASONING = "Solid outfit combination for the occasion."


def _color_preference_bonus(items: List[ClothingItem], preferred_colors: Optional[Iterable[str]]) -> float:
    preferred = set(preferred_colors or [])
    if not preferred:
        return 0.0
    matched = any(
        item.primary_color in preferred or any(color in preferred for color in item.colors) for item in items
    )
    return COLOR_PREFERENCE_BONUS if matched else 0.0


def _freshness_bonus(items: List[ClothingItem]) -> float:
    average_wear = sum(item.wear_count for item in items) / len(items)
    return max(0.0, (FRESHNESS_WEAR_HORIZON - average_wear) / FRESHNESS_WEAR_HORIZON * FRESHNESS_BONUS)


def _favorite_bonus(items: List[ClothingItem]) -> float:
    return FAVORITE_BONUS if any(item.is_favorite for item in items) else 0.0


def build_reasoning(
    items: List[ClothingItem], occasion: str, style_value: float, color_value: float
) -> str:
    """Compose the human-readable explanation shown with a recommendation."""

    reasons: List[str] = []
    if style_value >= 0.8:
        reasons.append(f"Perfect {occasion} styling with well-coordinated pieces")
    elif style_value >= 0.6:
        reasons.append(f"Good fit for {occasion} with versatile styling")

    if color_value >= 0.85:
        reasons.append("Excellent color coordination")
    elif color_value >= 0.7:
        reasons.append("Good color harmony")

    favorites = sum(1 for item in items if item.is_favorite)
    if favorites:
        reasons.append(f"Includes {favorites} of your favorite pieces")

    unworn = sum(1 for item in items if item.wear_count == 0)
    if unworn:
        reasons.append(f"Features {unworn} fresh pieces from your wardrobe")

    if not reasons:
        return FALLBACK_REASONING
    return ". ".join(reasons) + "."


def score_outfit(
    items: List[ClothingItem],
    occasion: str,
    preferred_colors: Optional[Iterable[str]] = None,
) -> OutfitRecommendation:
    """Score one combination and wrap it in an :class:`OutfitRecommendation`."""

    if not items:
        raise ValueError("Cannot score an outfit without items")

    style_value = style_score(items, occasion)
    color_value = outfit_harmony(items)
    base = style_value * WEIGHTS["style"] + color_value * WEIGHTS["color"]
    confidence = min(
        1.0,
        base
        + _color_preference_bonus(items, preferred_colors)
        + _freshness_bonus(items)
        + _favorite_bonus(items),
    )

    return OutfitRecommendation(
        items=list(items),
        confidence=confidence,
        style_score=style_value,
        color_harmony=color_value,
        reasoning=build_reasoning(items, occasion, style_value, color_value),
        occasion=occasion,
    )


__all__ = ["score_outfit", "build_reasoning", "WEIGHTS", "FALLBACK_REASONING"]
