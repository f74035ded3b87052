"""Outfit recommendation schema."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from models.clothing_item import ClothingItem


@dataclass
class OutfitRecommendation:
    items: List[ClothingItem] = field(default_factory=list)
    confidence: float = 0.0
    style_score: float = 0.0
    color_harmony: float = 0.0
    reasoning: str = ""
    occasion: str = ""

    @property
    def item_ids(self) -> List[str]:
        return [item.item_id for item in self.items]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "items": [item.to_dict() for item in self.items],
            "confidence": self.confidence,
            "style_score": self.style_score,
            "color_harmony": self.color_harmony,
            "reasoning": self.reasoning,
            "occasion": self.occasion,
        }
