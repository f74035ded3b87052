"""Enumerate candidate outfits from a wardrobe grouped by category."""
from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from models.clothing_item import ClothingItem
from models.taxonomy import CATEGORIES

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITEMS_PER_CATEGORY = 5
DEFAULT_MAX_COMBINATIONS = 100

# Skeleton weights are carried on the data but do not enter the confidence
# formula. Flip this to weight confidences by skeleton.
SKELETON_WEIGHT_IN_SCORE = False


@dataclass(frozen=True)
class OutfitSkeleton:
    """A complete outfit shape: the categories that must all be present."""

    name: str
    required: Tuple[str, ...]
    optional: Tuple[str, ...] = ()
    weight: float = 1.0


OUTFIT_SKELETONS: Tuple[OutfitSkeleton, ...] = (
    OutfitSkeleton(
        name="top-bottom-shoes",
        required=("tops", "bottoms", "shoes"),
        optional=("accessories", "outerwear"),
        weight=1.0,
    ),
    OutfitSkeleton(
        name="dress-shoes",
        required=("dresses", "shoes"),
        optional=("accessories", "outerwear"),
        weight=1.0,
    ),
    OutfitSkeleton(
        name="layered",
        required=("tops", "bottoms", "shoes", "outerwear"),
        optional=("accessories",),
        weight=0.9,
    ),
)


def group_items_by_category(items: Iterable[ClothingItem]) -> Dict[str, List[ClothingItem]]:
    """Partition items by category, keeping wardrobe iteration order within each group."""

    grouped: Dict[str, List[ClothingItem]] = {category: [] for category in CATEGORIES}
    for item in items:
        grouped[item.category].append(item)
    return grouped


def generate_combinations(
    grouped: Dict[str, List[ClothingItem]],
    skeleton: OutfitSkeleton,
    max_combinations: int = DEFAULT_MAX_COMBINATIONS,
    max_items_per_category: int = DEFAULT_MAX_ITEMS_PER_CATEGORY,
) -> List[List[ClothingItem]]:
    """Return up to ``max_combinations`` item lists satisfying ``skeleton``.

    Only the first ``max_items_per_category`` items of each required category
    take part. Enumeration order is the cross product with the first required
    category outermost. Optional categories are not combined in.
    """

    candidate_lists = [grouped.get(category, [])[:max_items_per_category] for category in skeleton.required]
    if not all(candidate_lists):
        logger.debug("Skeleton %s skipped: missing required categories", skeleton.name)
        return []

    combinations: List[List[ClothingItem]] = []
    for combo in itertools.product(*candidate_lists):
        if len(combinations) >= max_combinations:
            logger.debug("Skeleton %s reached cap of %s combinations", skeleton.name, max_combinations)
            break
        ids = [item.item_id for item in combo]
        if len(set(ids)) != len(ids):
            continue
        combinations.append(list(combo))

    logger.debug("Skeleton %s produced %s combinations", skeleton.name, len(combinations))
    return combinations


__all__ = [
    "DEFAULT_MAX_COMBINATIONS",
    "DEFAULT_MAX_ITEMS_PER_CATEGORY",
    "OUTFIT_SKELETONS",
    "OutfitSkeleton",
    "SKELETON_WEIGHT_IN_SCORE",
    "generate_combinations",
    "group_items_by_category",
]
