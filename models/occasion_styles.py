"""Mappings between occasions and appropriate clothing styles."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Sequence, Tuple

from models.clothing_item import ClothingItem
from models.taxonomy import validate_occasion

logger = logging.getLogger(__name__)

PREFERRED_SCORE = 1.0
ACCEPTABLE_SCORE = 0.7
AVOID_SCORE = 0.2
NEUTRAL_SCORE = 0.5


@dataclass(frozen=True)
class OccasionStyleProfile:
    """Style buckets for a given occasion."""

    name: str
    preferred: Tuple[str, ...]
    acceptable: Tuple[str, ...]
    avoid: Tuple[str, ...]


OCCASION_STYLE_MAP: Mapping[str, OccasionStyleProfile] = MappingProxyType(
    {
        "work": OccasionStyleProfile(
            name="work",
            preferred=("business", "elegant"),
            acceptable=("casual",),
            avoid=("sporty", "trendy"),
        ),
        "casual": OccasionStyleProfile(
            name="casual",
            preferred=("casual", "sporty"),
            acceptable=("trendy",),
            avoid=("business", "elegant"),
        ),
        "date": OccasionStyleProfile(
            name="date",
            preferred=("elegant", "trendy"),
            acceptable=("casual",),
            avoid=("sporty", "business"),
        ),
        "formal": OccasionStyleProfile(
            name="formal",
            preferred=("elegant", "business"),
            acceptable=(),
            avoid=("casual", "sporty", "trendy"),
        ),
        "party": OccasionStyleProfile(
            name="party",
            preferred=("trendy", "elegant"),
            acceptable=("casual",),
            avoid=("business", "sporty"),
        ),
    }
)


def get_occasion_style(occasion: str) -> OccasionStyleProfile:
    """Return the :class:`OccasionStyleProfile` for ``occasion``.

    Raises :class:`models.taxonomy.InvalidOccasion` for unsupported occasions.
    """

    return OCCASION_STYLE_MAP[validate_occasion(occasion)]


def style_fit(style: str, profile: OccasionStyleProfile) -> float:
    if style in profile.preferred:
        return PREFERRED_SCORE
    if style in profile.acceptable:
        return ACCEPTABLE_SCORE
    if style in profile.avoid:
        return AVOID_SCORE
    return NEUTRAL_SCORE


def style_score(items: Sequence[ClothingItem], occasion: str) -> float:
    """Average per-item style fit for the occasion; 0 when there are no items."""

    profile = get_occasion_style(occasion)
    if not items:
        return 0.0
    total = sum(style_fit(item.style, profile) for item in items)
    score = total / len(items)
    logger.debug("style score for %s %s -> %.3f", profile.name, [item.style for item in items], score)
    return score


__all__ = [
    "OCCASION_STYLE_MAP",
    "OccasionStyleProfile",
    "get_occasion_style",
    "style_fit",
    "style_score",
]
