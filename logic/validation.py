"""Pydantic schemas and helpers for validating HTTP and app payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from models.taxonomy import validate_category, validate_occasion, validate_season, validate_style


class ClothingItemPayload(BaseModel):
    """Input contract for adding an item to a wardrobe."""

    item_id: Optional[str] = None
    name: str = ""
    category: str
    item_type: Optional[str] = None
    colors: List[str] = Field(default_factory=list)
    primary_color: Optional[str] = None
    style: str
    seasons: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    wear_count: int = Field(0, ge=0)
    is_favorite: bool = False
    date_added: Optional[datetime] = None
    image_url: Optional[str] = None
    brand: Optional[str] = None
    source_url: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("category")
    @classmethod
    def _validate_category(cls, category: str) -> str:
        return validate_category(category)

    @field_validator("style")
    @classmethod
    def _validate_style(cls, style: str) -> str:
        return validate_style(style)

class ClothingItemUpdate(BaseModel):
    """Partial edit of an existing item; omitted fields are left alone."""

    name: Optional[str] = None
    category: Optional[str] = None
    item_type: Optional[str] = None
    colors: Optional[List[str]] = None
    primary_color: Optional[str] = None
    style: Optional[str] = None
    seasons: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    is_favorite: Optional[bool] = None
    image_url: Optional[str] = None
    brand: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("category")
    @classmethod
    def _validate_category(cls, category: Optional[str]) -> Optional[str]:
        return validate_category(category) if category is not None else None

    @field_validator("style")
    @classmethod
    def _validate_style(cls, style: Optional[str]) -> Optional[str]:
        return validate_style(style) if style is not None else None

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class ProductMetadata(BaseModel):
    """Already-parsed product listing data to turn into a wardrobe item.

    Category, type, style, colors and seasons are inferred from the title and
    description when they are not given. Without a title the item is named
    from its colors and type.
    """

    title: str = ""
    description: str = ""
    category: Optional[str] = None
    style: Optional[str] = None
    colors: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    image_url: Optional[str] = None
    source_url: Optional[str] = None
    brand: Optional[str] = None

    @field_validator("category")
    @classmethod
    def _validate_category(cls, category: Optional[str]) -> Optional[str]:
        return validate_category(category) if category is not None else None

    @field_validator("style")
    @classmethod
    def _validate_style(cls, style: Optional[str]) -> Optional[str]:
        return validate_style(style) if style is not None else None


class RecommendationRequest(BaseModel):
    """Request contract for ranked outfit recommendations."""

    user_id: str = Field(min_length=1)
    occasion: str
    season: Optional[str] = None
    preferred_colors: List[str] = Field(default_factory=list)
    exclude_item_ids: List[str] = Field(default_factory=list)
    include_item_ids: List[str] = Field(default_factory=list)
    max_recommendations: Optional[int] = Field(None, ge=1, le=50)

    @field_validator("occasion")
    @classmethod
    def _validate_occasion(cls, occasion: str) -> str:
        return validate_occasion(occasion)

    @field_validator("season")
    @classmethod
    def _validate_season(cls, season: Optional[str]) -> Optional[str]:
        return validate_season(season) if season else None


class QuickSuggestionRequest(BaseModel):
    """Request contract for quick suggestions biased towards fresh items."""

    user_id: str = Field(min_length=1)
    occasion: str
    max_suggestions: Optional[int] = Field(None, ge=0, le=10)

    @field_validator("occasion")
    @classmethod
    def _validate_occasion(cls, occasion: str) -> str:
        return validate_occasion(occasion)


class RecommendationResponse(BaseModel):
    """Ranked recommendations plus timing for the presentation layer."""

    recommendations: List[Dict[str, Any]]
    total_count: int
    processing_time_ms: float


__all__ = [
    "ClothingItemPayload",
    "ClothingItemUpdate",
    "ProductMetadata",
    "RecommendationRequest",
    "QuickSuggestionRequest",
    "RecommendationResponse",
]
