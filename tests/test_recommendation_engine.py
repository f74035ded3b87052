"""Combination generation and recommendation engine tests."""
from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic import recommendations as engine
from logic.combination_generator import (
    OUTFIT_SKELETONS,
    SKELETON_WEIGHT_IN_SCORE,
    generate_combinations,
    group_items_by_category,
)
from logic.recommendations import (
    RecommendationOptions,
    generate_outfit_recommendations,
    get_quick_outfit_suggestions,
    prioritize_wardrobe,
)
from models.clothing_item import ClothingItem
from models.taxonomy import CATEGORIES, InvalidCategory, InvalidOccasion

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


def _item(item_id: str, category: str, color: str = "black", style: str = "casual", **extra) -> ClothingItem:
    extra.setdefault("seasons", ["all-season"])
    extra.setdefault("date_added", NOW - timedelta(days=30))
    return ClothingItem(
        item_id=item_id,
        user_id="tester",
        category=category,
        colors=[color],
        primary_color=color,
        style=style,
        **extra,
    )


def _ids(outfit) -> List[str]:
    return [item.item_id for item in outfit.items]


@pytest.fixture()
def work_wardrobe() -> List[ClothingItem]:
    return [
        _item("top-1", "tops", "white", "business", is_favorite=True),
        _item("bottom-1", "bottoms", "navy", "business"),
        _item("shoes-1", "shoes", "black", "casual"),
    ]


def test_skeletons_and_inert_weight() -> None:
    assert [skeleton.required for skeleton in OUTFIT_SKELETONS] == [
        ("tops", "bottoms", "shoes"),
        ("dresses", "shoes"),
        ("tops", "bottoms", "shoes", "outerwear"),
    ]
    assert [skeleton.weight for skeleton in OUTFIT_SKELETONS] == [1.0, 1.0, 0.9]
    assert SKELETON_WEIGHT_IN_SCORE is False


def test_group_items_by_category_keeps_order() -> None:
    items = [_item("t2", "tops"), _item("s1", "shoes"), _item("t1", "tops")]
    grouped = group_items_by_category(items)
    assert list(grouped) == CATEGORIES
    assert [item.item_id for item in grouped["tops"]] == ["t2", "t1"]
    assert grouped["dresses"] == []


def test_generate_combinations_requires_every_category() -> None:
    grouped = group_items_by_category([_item("t1", "tops"), _item("s1", "shoes")])
    assert generate_combinations(grouped, OUTFIT_SKELETONS[0]) == []


def test_generate_combinations_respects_category_cap() -> None:
    tops = [_item(f"top-{index}", "tops") for index in range(1, 8)]
    grouped = group_items_by_category(tops + [_item("b1", "bottoms"), _item("s1", "shoes")])

    combos = generate_combinations(grouped, OUTFIT_SKELETONS[0], max_items_per_category=5)
    assert [combo[0].item_id for combo in combos] == ["top-1", "top-2", "top-3", "top-4", "top-5"]
    assert all([item.item_id for item in combo[1:]] == ["b1", "s1"] for combo in combos)


def test_generate_combinations_stops_at_global_cap() -> None:
    items = [_item(f"t{i}", "tops") for i in range(3)] + [_item(f"b{i}", "bottoms") for i in range(3)]
    items.append(_item("s1", "shoes"))
    combos = generate_combinations(group_items_by_category(items), OUTFIT_SKELETONS[0], max_combinations=4)
    assert [[item.item_id for item in combo] for combo in combos] == [
        ["t0", "b0", "s1"],
        ["t0", "b1", "s1"],
        ["t0", "b2", "s1"],
        ["t1", "b0", "s1"],
    ]


def test_empty_wardrobe_returns_empty_list() -> None:
    assert generate_outfit_recommendations([], "work") == []
    assert generate_outfit_recommendations([], "work", RecommendationOptions()) == []


def test_unsatisfiable_wardrobe_returns_empty_list() -> None:
    wardrobe = [_item("t1", "tops"), _item("a1", "accessories")]
    assert generate_outfit_recommendations(wardrobe, "casual") == []


def test_end_to_end_work_scenario(work_wardrobe: List[ClothingItem]) -> None:
    results = generate_outfit_recommendations(work_wardrobe, "work")
    assert len(results) == 1
    outfit = results[0]
    assert _ids(outfit) == ["top-1", "bottom-1", "shoes-1"]
    assert outfit.occasion == "work"
    assert outfit.style_score == pytest.approx(0.9)
    assert outfit.color_harmony == pytest.approx((0.95 + 0.95 + 0.2) / 3)
    assert outfit.confidence == pytest.approx(0.5 * 0.9 + 0.4 * 0.7 + 0.1 + 0.05)
    assert outfit.reasoning.startswith("Perfect work styling")
    assert "Includes 1 of your favorite pieces" in outfit.reasoning
    assert outfit.reasoning.endswith(".")


def test_recommendations_are_deterministic() -> None:
    wardrobe = [
        _item("t1", "tops", "white", "casual"),
        _item("t2", "tops", "red", "trendy", wear_count=3),
        _item("b1", "bottoms", "blue", "casual"),
        _item("b2", "bottoms", "beige", "elegant", is_favorite=True),
        _item("d1", "dresses", "black", "elegant"),
        _item("s1", "shoes", "white", "sporty"),
        _item("s2", "shoes", "brown", "casual", wear_count=7),
        _item("o1", "outerwear", "navy", "business"),
    ]
    options = RecommendationOptions(preferred_colors=["red"], max_recommendations=20)
    first = [outfit.to_dict() for outfit in generate_outfit_recommendations(wardrobe, "date", options)]
    second = [outfit.to_dict() for outfit in generate_outfit_recommendations(wardrobe, "date", options)]
    assert first == second
    confidences = [outfit["confidence"] for outfit in first]
    assert confidences == sorted(confidences, reverse=True)
    assert any(len(outfit["items"]) == 2 for outfit in first)
    assert any(len(outfit["items"]) == 4 for outfit in first)


def test_ties_keep_generation_order() -> None:
    wardrobe = [
        _item("t-a", "tops"),
        _item("t-b", "tops"),
        _item("b1", "bottoms"),
        _item("s1", "shoes"),
    ]
    results = generate_outfit_recommendations(wardrobe, "casual")
    assert [_ids(outfit) for outfit in results] == [["t-a", "b1", "s1"], ["t-b", "b1", "s1"]]
    assert results[0].confidence == results[1].confidence


def test_duplicate_item_sets_collapse(monkeypatch: pytest.MonkeyPatch) -> None:
    top, bottom, shoes = _item("t1", "tops"), _item("b1", "bottoms"), _item("s1", "shoes")

    def fake_generate(grouped, skeleton, **_):
        if skeleton.name != "top-bottom-shoes":
            return []
        return [[top, bottom, shoes], [shoes, top, bottom]]

    monkeypatch.setattr(engine, "generate_combinations", fake_generate)
    results = generate_outfit_recommendations([top, bottom, shoes], "casual")
    assert len(results) == 1
    assert _ids(results[0]) == ["t1", "b1", "s1"]


def test_repeated_wardrobe_entries_do_not_repeat_outfits() -> None:
    top = _item("t1", "tops")
    wardrobe = [top, top, _item("b1", "bottoms"), _item("s1", "shoes")]
    assert len(generate_outfit_recommendations(wardrobe, "casual")) == 1


def test_exclude_and_season_filters() -> None:
    wardrobe = [
        _item("t1", "tops", seasons=["summer"]),
        _item("t2", "tops", seasons=["winter"]),
        _item("b1", "bottoms"),
        _item("s1", "shoes"),
    ]
    summer = generate_outfit_recommendations(wardrobe, "casual", RecommendationOptions(season="summer"))
    assert [_ids(outfit) for outfit in summer] == [["t1", "b1", "s1"]]

    excluded = generate_outfit_recommendations(wardrobe, "casual", RecommendationOptions(exclude_item_ids=["t1"]))
    assert [_ids(outfit) for outfit in excluded] == [["t2", "b1", "s1"]]


def test_include_items_must_all_be_present() -> None:
    wardrobe = [
        _item("t1", "tops"),
        _item("t2", "tops"),
        _item("b1", "bottoms"),
        _item("s1", "shoes"),
        _item("o1", "outerwear"),
    ]
    results = generate_outfit_recommendations(
        wardrobe, "casual", RecommendationOptions(include_item_ids=["t2", "o1"])
    )
    assert [_ids(outfit) for outfit in results] == [["t2", "b1", "s1", "o1"]]

    unknown = generate_outfit_recommendations(
        wardrobe, "casual", RecommendationOptions(include_item_ids=["missing"])
    )
    assert len(unknown) == len(generate_outfit_recommendations(wardrobe, "casual"))

    conflicting = generate_outfit_recommendations(
        wardrobe, "casual", RecommendationOptions(include_item_ids=["t1", "t2"])
    )
    assert conflicting == []


def test_max_recommendations_limits_results() -> None:
    wardrobe = [_item(f"t{i}", "tops") for i in range(4)] + [_item("b1", "bottoms"), _item("s1", "shoes")]
    assert len(generate_outfit_recommendations(wardrobe, "casual", RecommendationOptions(max_recommendations=2))) == 2
    assert len(generate_outfit_recommendations(wardrobe, "casual")) == 4


def test_category_cap_limits_participating_tops() -> None:
    tops = [_item(f"top-{index}", "tops") for index in range(1, 8)]
    wardrobe = tops + [_item("b1", "bottoms"), _item("s1", "shoes")]
    results = generate_outfit_recommendations(wardrobe, "casual")
    assert {outfit.items[0].item_id for outfit in results} == {f"top-{index}" for index in range(1, 6)}


def test_quick_suggestions_prioritise_fresh_items() -> None:
    tops = [_item(f"top-{index}", "tops", wear_count=9) for index in range(1, 6)]
    tops += [_item("top-6", "tops", wear_count=0), _item("top-7", "tops", wear_count=0)]
    wardrobe = tops + [_item("b1", "bottoms"), _item("s1", "shoes")]

    results = get_quick_outfit_suggestions(wardrobe, "casual", max_suggestions=10, now=NOW)
    used_tops = {outfit.items[0].item_id for outfit in results}
    assert {"top-6", "top-7"} <= used_tops
    assert len(used_tops) == 5
    assert [item.item_id for item in wardrobe[:2]] == ["top-1", "top-2"]


def test_prioritize_wardrobe_scores_recency_and_favorites() -> None:
    old = _item("old", "tops", wear_count=2)
    recent = _item("recent", "tops", wear_count=2, date_added=NOW - timedelta(days=2))
    favorite = _item("favorite", "tops", wear_count=2, is_favorite=True)
    ordered = prioritize_wardrobe([old, favorite, recent], now=NOW)
    assert [item.item_id for item in ordered] == ["recent", "favorite", "old"]


def test_quick_suggestions_default_limit() -> None:
    wardrobe = [_item(f"t{i}", "tops") for i in range(5)] + [_item("b1", "bottoms"), _item("s1", "shoes")]
    assert len(get_quick_outfit_suggestions(wardrobe, "casual", now=NOW)) == 3


def test_invalid_inputs_raise_at_the_boundary() -> None:
    with pytest.raises(InvalidCategory):
        _item("h1", "hats")
    with pytest.raises(InvalidOccasion):
        generate_outfit_recommendations([], "brunch")
