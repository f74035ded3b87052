"""Color harmony, occasion style and outfit scoring tests."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.outfit_scoring import FALLBACK_REASONING, build_reasoning, score_outfit
from models.clothing_item import ClothingItem
from models.color_theory import COLOR_HARMONY_MATRIX, outfit_harmony, pair_harmony
from models.occasion_styles import get_occasion_style, style_fit, style_score
from models.taxonomy import COLOR_FAMILIES, InvalidOccasion


def _item(item_id: str, category: str, color: str, style: str, **extra) -> ClothingItem:
    return ClothingItem(
        item_id=item_id,
        user_id="tester",
        category=category,
        colors=extra.pop("colors", [color]),
        primary_color=color,
        style=style,
        seasons=["all-season"],
        **extra,
    )


def test_harmony_table_covers_every_color_family() -> None:
    assert set(COLOR_HARMONY_MATRIX) == set(COLOR_FAMILIES)


def test_identical_colors_always_harmonize() -> None:
    assert pair_harmony("red", "red") == 1.0
    assert pair_harmony("multi", "multi") == 1.0


def test_pair_harmony_looks_up_first_color_profile() -> None:
    assert pair_harmony("black", "white") == 0.95
    assert pair_harmony("white", "black") == 0.95

    # navy lists black as avoided while black says nothing about navy
    assert pair_harmony("navy", "black") == 0.2
    assert pair_harmony("black", "navy") == 0.6

    assert pair_harmony("blue", "navy") == 0.8
    assert pair_harmony("navy", "blue") == 0.6


def test_pair_harmony_unknown_profile_is_neutral() -> None:
    assert pair_harmony("teal", "black") == 0.5
    assert pair_harmony("gray", "brown") == 0.6


def test_outfit_harmony_single_item_and_pairs() -> None:
    top = _item("t1", "tops", "white", "business")
    assert outfit_harmony([top]) == 1.0
    assert outfit_harmony([]) == 1.0

    bottom = _item("b1", "bottoms", "navy", "business")
    shoes = _item("s1", "shoes", "black", "casual")
    assert outfit_harmony([top, bottom, shoes]) == pytest.approx((0.95 + 0.95 + 0.2) / 3)


def test_style_buckets_per_occasion() -> None:
    work = get_occasion_style("work")
    assert style_fit("business", work) == 1.0
    assert style_fit("casual", work) == 0.7
    assert style_fit("sporty", work) == 0.2

    formal = get_occasion_style("Formal")
    assert formal.acceptable == ()
    assert style_fit("trendy", formal) == 0.2


def test_style_score_is_mean_and_zero_for_empty() -> None:
    preferred = _item("t1", "tops", "white", "elegant")
    avoided = _item("s1", "shoes", "black", "sporty")
    assert style_score([preferred], "date") == 1.0
    assert style_score([avoided], "date") == 0.2
    assert style_score([preferred, avoided], "date") == pytest.approx(0.6)
    assert style_score([], "date") == 0


def test_unknown_occasion_is_rejected() -> None:
    with pytest.raises(InvalidOccasion):
        get_occasion_style("wedding")


def test_confidence_is_clamped_to_one() -> None:
    items = [
        _item("t1", "tops", "white", "elegant", is_favorite=True),
        _item("b1", "bottoms", "white", "elegant", is_favorite=True),
        _item("s1", "shoes", "white", "business", is_favorite=True),
    ]
    outfit = score_outfit(items, "formal", preferred_colors=["white"])
    assert outfit.style_score == 1.0
    assert outfit.color_harmony == 1.0
    assert outfit.confidence == 1.0


def test_confidence_formula_components() -> None:
    items = [
        _item("t1", "tops", "red", "sporty", wear_count=10),
        _item("b1", "bottoms", "pink", "sporty", wear_count=20),
    ]
    outfit = score_outfit(items, "work")
    # style 0.2, harmony red->pink 0.2, no bonuses since average wear is past the horizon
    assert outfit.confidence == pytest.approx(0.5 * 0.2 + 0.4 * 0.2)
    assert outfit.reasoning == FALLBACK_REASONING


def test_color_preference_bonus_matches_secondary_colors() -> None:
    striped = _item("t1", "tops", "white", "casual", colors=["white", "navy"], wear_count=10)
    jeans = _item("b1", "bottoms", "blue", "casual", wear_count=10)
    without = score_outfit([striped, jeans], "casual")
    with_pref = score_outfit([striped, jeans], "casual", preferred_colors=["navy"])
    assert with_pref.confidence - without.confidence == pytest.approx(0.1)


def test_freshness_bonus_scales_with_average_wear() -> None:
    fresh = [_item("t1", "tops", "black", "casual"), _item("b1", "bottoms", "black", "casual")]
    worn = [
        _item("t2", "tops", "black", "casual", wear_count=5),
        _item("b2", "bottoms", "black", "casual", wear_count=5),
    ]
    assert score_outfit(fresh, "casual").confidence - score_outfit(worn, "casual").confidence == pytest.approx(0.05)


def test_reasoning_clauses_in_order() -> None:
    items = [
        _item("t1", "tops", "white", "business", is_favorite=True, wear_count=3),
        _item("b1", "bottoms", "black", "business"),
    ]
    reasoning = build_reasoning(items, "work", 1.0, 0.95)
    assert reasoning == (
        "Perfect work styling with well-coordinated pieces. "
        "Excellent color coordination. "
        "Includes 1 of your favorite pieces. "
        "Features 1 fresh pieces from your wardrobe."
    )

    middling = build_reasoning(items[1:], "date", 0.65, 0.75)
    assert middling.startswith("Good fit for date with versatile styling. Good color harmony.")


def test_reasoning_falls_back_when_nothing_stands_out() -> None:
    items = [_item("t1", "tops", "red", "sporty", wear_count=4)]
    assert build_reasoning(items, "formal", 0.2, 0.5) == "Solid outfit combination for the occasion."
