"""Color harmony lookups for deterministic outfit scoring.

Each color family carries its own profile of complementary, compatible and
avoided families. Lookups always enter through the first color's profile, so
``pair_harmony(a, b)`` and ``pair_harmony(b, a)`` may differ.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Sequence, Tuple

from models.clothing_item import ClothingItem

logger = logging.getLogger(__name__)

IDENTICAL_SCORE = 1.0
COMPLEMENTARY_SCORE = 0.95
COMPATIBLE_SCORE = 0.8
AVOID_SCORE = 0.2
NEUTRAL_SCORE = 0.6
UNKNOWN_COLOR_SCORE = 0.5


@dataclass(frozen=True)
class ColorHarmonyProfile:
    """Relationships of one color family to the others."""

    complementary: Tuple[str, ...]
    compatible: Tuple[str, ...]
    avoid: Tuple[str, ...]


COLOR_HARMONY_MATRIX: Mapping[str, ColorHarmonyProfile] = MappingProxyType(
    {
        "black": ColorHarmonyProfile(
            complementary=("white", "gray"),
            compatible=("red", "blue", "pink", "yellow", "green", "purple", "orange"),
            avoid=("brown",),
        ),
        "white": ColorHarmonyProfile(
            complementary=("black", "navy"),
            compatible=("blue", "red", "green", "pink", "purple", "orange", "yellow"),
            avoid=("beige",),
        ),
        "gray": ColorHarmonyProfile(
            complementary=("black", "white"),
            compatible=("red", "blue", "pink", "yellow", "green", "purple", "orange"),
            avoid=(),
        ),
        "navy": ColorHarmonyProfile(
            complementary=("white", "beige"),
            compatible=("red", "pink", "yellow", "gray"),
            avoid=("black", "brown"),
        ),
        "blue": ColorHarmonyProfile(
            complementary=("orange", "yellow"),
            compatible=("white", "gray", "navy", "beige"),
            avoid=("green", "purple"),
        ),
        "red": ColorHarmonyProfile(
            complementary=("green", "white"),
            compatible=("black", "gray", "navy", "beige"),
            avoid=("orange", "pink"),
        ),
        "green": ColorHarmonyProfile(
            complementary=("red", "pink"),
            compatible=("beige", "brown", "white", "navy"),
            avoid=("blue", "purple"),
        ),
        "yellow": ColorHarmonyProfile(
            complementary=("purple", "blue"),
            compatible=("white", "gray", "black", "navy"),
            avoid=("orange", "green"),
        ),
        "orange": ColorHarmonyProfile(
            complementary=("blue", "navy"),
            compatible=("white", "black", "brown", "beige"),
            avoid=("red", "pink"),
        ),
        "purple": ColorHarmonyProfile(
            complementary=("yellow", "green"),
            compatible=("white", "gray", "black"),
            avoid=("red", "orange"),
        ),
        "pink": ColorHarmonyProfile(
            complementary=("green", "navy"),
            compatible=("white", "gray", "black", "beige"),
            avoid=("red", "orange"),
        ),
        "brown": ColorHarmonyProfile(
            complementary=("blue", "green"),
            compatible=("beige", "white", "orange", "yellow"),
            avoid=("black", "purple"),
        ),
        "beige": ColorHarmonyProfile(
            complementary=("navy", "brown"),
            compatible=("white", "blue", "green", "pink"),
            avoid=("yellow",),
        ),
        "multi": ColorHarmonyProfile(
            complementary=("black", "white"),
            compatible=("gray", "navy", "beige"),
            avoid=(),
        ),
    }
)


def pair_harmony(color_a: str, color_b: str) -> float:
    """Score how well ``color_b`` sits next to ``color_a``, looked up from ``color_a``'s profile."""

    if color_a == color_b:
        return IDENTICAL_SCORE

    profile = COLOR_HARMONY_MATRIX.get(color_a)
    if profile is None:
        logger.debug("No harmony profile for %s", color_a)
        return UNKNOWN_COLOR_SCORE

    if color_b in profile.complementary:
        return COMPLEMENTARY_SCORE
    if color_b in profile.compatible:
        return COMPATIBLE_SCORE
    if color_b in profile.avoid:
        return AVOID_SCORE
    return NEUTRAL_SCORE


def outfit_harmony(items: Sequence[ClothingItem]) -> float:
    """Return the mean pairwise harmony of the items' primary colors."""

    if len(items) < 2:
        return 1.0

    total = 0.0
    pairs = 0
    for i in range(len(items)):
        for j in range(i + 1, len(items)):
            total += pair_harmony(items[i].primary_color, items[j].primary_color)
            pairs += 1
    harmony = total / pairs
    logger.debug(
        "outfit harmony %s -> %.3f", [item.primary_color for item in items], harmony
    )
    return harmony


__all__ = [
    "COLOR_HARMONY_MATRIX",
    "ColorHarmonyProfile",
    "pair_harmony",
    "outfit_harmony",
]
