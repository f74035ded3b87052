"""Stylist app bootstrap."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from logic.recommendations import (
    RecommendationOptions,
    generate_outfit_recommendations,
    get_quick_outfit_suggestions,
)
from logic.validation import (
    ClothingItemPayload,
    ClothingItemUpdate,
    ProductMetadata,
    QuickSuggestionRequest,
    RecommendationRequest,
)
from models.clothing_item import ClothingItem
from models.ingestion_mapping import map_raw_metadata_to_clothing_item
from models.outfit import OutfitRecommendation
from stylist_app.config import StylistConfig
from stylist_app.logging_config import configure_logging, get_logger, log_event, wardrobe_summary
from tools.observability import instrument_operation
from tools.seed_data import create_seed_items
from tools.wardrobe_store import InMemoryWardrobeStore, SQLiteWardrobeStore, WardrobeStore

LOGGER = get_logger(__name__)


class ItemNotFoundError(LookupError):
    """Raised when a wardrobe item does not exist for the user."""


class StylistApp:
    """Wires configuration, logging and wardrobe storage around the recommendation engine."""

    def __init__(self, config: StylistConfig | None = None, store: WardrobeStore | None = None) -> None:
        self.config = config or StylistConfig.from_env()
        configure_logging(self.config.log_level)
        self.wardrobe_store = store or self._build_store()

    def _build_store(self) -> WardrobeStore:
        if self.config.wardrobe_backend == "sqlite":
            return SQLiteWardrobeStore(self.config.wardrobe_db_path or "data/wardrobe.db")
        return InMemoryWardrobeStore()

    def _options(self, **overrides: Any) -> RecommendationOptions:
        values = {
            "max_recommendations": self.config.max_recommendations,
            "max_items_per_category": self.config.max_items_per_category,
            "max_combinations_per_skeleton": self.config.max_combinations_per_skeleton,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return RecommendationOptions(**values)

    def _require(self, item: Optional[ClothingItem], item_id: str) -> ClothingItem:
        if item is None:
            raise ItemNotFoundError(f"Item '{item_id}' not found")
        return item

    @instrument_operation("list_items")
    def list_items(self, user_id: str) -> List[ClothingItem]:
        return self.wardrobe_store.list_items_for_user(user_id)

    @instrument_operation("add_item")
    def add_item(self, user_id: str, payload: ClothingItemPayload) -> ClothingItem:
        data = payload.model_dump(exclude_none=True)
        data["item_id"] = data.get("item_id") or uuid.uuid4().hex
        if not data.get("primary_color"):
            data["primary_color"] = data["colors"][0] if data.get("colors") else "multi"
        item = ClothingItem(user_id=user_id, **data)
        return self.wardrobe_store.create_item(item)

    @instrument_operation("import_item")
    def import_item(self, user_id: str, metadata: ProductMetadata) -> ClothingItem:
        """Create an item from parsed product data, inferring what the listing leaves out."""

        item = map_raw_metadata_to_clothing_item(user_id, metadata.model_dump(exclude_none=True))
        return self.wardrobe_store.create_item(item)

    @instrument_operation("update_item")
    def update_item(self, user_id: str, item_id: str, update: ClothingItemUpdate) -> ClothingItem:
        return self._require(self.wardrobe_store.update_item(user_id, item_id, update.changes()), item_id)

    @instrument_operation("delete_item")
    def delete_item(self, user_id: str, item_id: str) -> None:
        if not self.wardrobe_store.delete_item(user_id, item_id):
            raise ItemNotFoundError(f"Item '{item_id}' not found")

    @instrument_operation("seed_wardrobe")
    def seed_wardrobe(self, user_id: str, now: Optional[datetime] = None) -> List[ClothingItem]:
        """Add the sample wardrobe unless the user already owns items."""

        if self.wardrobe_store.list_items_for_user(user_id):
            log_event(LOGGER, logging.INFO, "seed_skipped", reason="wardrobe_not_empty")
            return []
        return [self.wardrobe_store.create_item(item) for item in create_seed_items(user_id, now=now)]

    @instrument_operation("reset_wardrobe")
    def reset_wardrobe(self, user_id: str, now: Optional[datetime] = None) -> List[ClothingItem]:
        removed = self.wardrobe_store.clear_user(user_id)
        log_event(LOGGER, logging.INFO, "wardrobe_cleared", removed=removed)
        return [self.wardrobe_store.create_item(item) for item in create_seed_items(user_id, now=now)]

    @instrument_operation("wear_item")
    def wear_item(self, user_id: str, item_id: str) -> ClothingItem:
        return self._require(self.wardrobe_store.record_wear(user_id, item_id), item_id)

    @instrument_operation("toggle_favorite")
    def toggle_favorite(self, user_id: str, item_id: str) -> ClothingItem:
        return self._require(self.wardrobe_store.toggle_favorite(user_id, item_id), item_id)

    @instrument_operation("recommend", input_model=RecommendationRequest)
    def recommend(
        self,
        user_id: str,
        occasion: str,
        season: Optional[str] = None,
        preferred_colors: Optional[List[str]] = None,
        exclude_item_ids: Optional[List[str]] = None,
        include_item_ids: Optional[List[str]] = None,
        max_recommendations: Optional[int] = None,
    ) -> List[OutfitRecommendation]:
        options = self._options(
            season=season,
            preferred_colors=preferred_colors,
            exclude_item_ids=exclude_item_ids,
            include_item_ids=include_item_ids,
            max_recommendations=max_recommendations,
        )
        wardrobe = self.wardrobe_store.list_items_for_user(user_id)
        outfits = generate_outfit_recommendations(wardrobe, occasion, options)
        log_event(
            LOGGER,
            logging.INFO,
            "outfits_ranked",
            occasion=occasion,
            season=options.season,
            wardrobe=wardrobe_summary(wardrobe),
            outfits=len(outfits),
            max_recommendations=options.max_recommendations,
            max_items_per_category=options.max_items_per_category,
            max_combinations_per_skeleton=options.max_combinations_per_skeleton,
        )
        return outfits

    @instrument_operation("quick_suggestions", input_model=QuickSuggestionRequest)
    def quick_suggestions(
        self,
        user_id: str,
        occasion: str,
        max_suggestions: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> List[OutfitRecommendation]:
        limit = self.config.quick_suggestions if max_suggestions is None else max_suggestions
        wardrobe = self.wardrobe_store.list_items_for_user(user_id)
        outfits = get_quick_outfit_suggestions(
            wardrobe,
            occasion,
            max_suggestions=limit,
            now=now,
            options=self._options(),
        )
        log_event(
            LOGGER,
            logging.INFO,
            "quick_outfits_ranked",
            occasion=occasion,
            wardrobe=wardrobe_summary(wardrobe),
            outfits=len(outfits),
            max_suggestions=limit,
        )
        return outfits

    def describe(self) -> Dict[str, Any]:
        return {
            "environment": self.config.environment or "local",
            "wardrobe_backend": self.config.wardrobe_backend,
            "max_items_per_category": self.config.max_items_per_category,
            "max_combinations_per_skeleton": self.config.max_combinations_per_skeleton,
            "max_recommendations": self.config.max_recommendations,
        }


__all__ = ["StylistApp", "ItemNotFoundError"]
