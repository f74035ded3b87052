"""FastAPI server exposing wardrobe and outfit recommendation endpoints."""

import time

from fastapi import FastAPI, HTTPException

from logic.validation import (
    ClothingItemPayload,
    ClothingItemUpdate,
    ProductMetadata,
    QuickSuggestionRequest,
    RecommendationRequest,
    RecommendationResponse,
)
from stylist_app.app import ItemNotFoundError, StylistApp
from stylist_app.logging_config import configure_logging

configure_logging()

stylist_app = StylistApp()
app = FastAPI(title="Outfit Stylist", version="0.1.0")


@app.get("/healthz")
async def healthcheck() -> dict:
    """Lightweight readiness probe."""

    return {"status": "ok", "service": "outfit-stylist", **stylist_app.describe()}


@app.get("/clothing/{user_id}")
async def list_clothing(user_id: str) -> dict:
    items = stylist_app.list_items(user_id)
    return {"items": [item.to_dict() for item in items], "total_count": len(items)}


@app.post("/clothing/{user_id}", status_code=201)
async def add_clothing(user_id: str, payload: ClothingItemPayload) -> dict:
    try:
        item = stylist_app.add_item(user_id, payload)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return item.to_dict()


@app.post("/clothing/{user_id}/import", status_code=201)
async def import_clothing(user_id: str, metadata: ProductMetadata) -> dict:
    """Add an item from parsed product listing data."""

    try:
        item = stylist_app.import_item(user_id, metadata)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return item.to_dict()


@app.put("/clothing/{user_id}/{item_id}")
async def update_clothing(user_id: str, item_id: str, update: ClothingItemUpdate) -> dict:
    try:
        item = stylist_app.update_item(user_id, item_id, update)
    except ItemNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return item.to_dict()


@app.delete("/clothing/{user_id}/{item_id}")
async def delete_clothing(user_id: str, item_id: str) -> dict:
    try:
        stylist_app.delete_item(user_id, item_id)
    except ItemNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return {"deleted": item_id}


@app.post("/clothing/{user_id}/seed")
async def seed_clothing(user_id: str) -> dict:
    """Populate a demo wardrobe for a user that has none yet."""

    items = stylist_app.seed_wardrobe(user_id)
    message = f"Added {len(items)} sample items" if items else "User already has wardrobe items"
    return {"message": message, "items": [item.to_dict() for item in items]}


@app.post("/clothing/{user_id}/reset")
async def reset_clothing(user_id: str) -> dict:
    items = stylist_app.reset_wardrobe(user_id)
    return {"message": f"Reset wardrobe with {len(items)} sample items", "items": [item.to_dict() for item in items]}


@app.post("/clothing/{user_id}/{item_id}/wear")
async def wear_clothing(user_id: str, item_id: str) -> dict:
    try:
        item = stylist_app.wear_item(user_id, item_id)
    except ItemNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return item.to_dict()


@app.post("/clothing/{user_id}/{item_id}/favorite")
async def favorite_clothing(user_id: str, item_id: str) -> dict:
    try:
        item = stylist_app.toggle_favorite(user_id, item_id)
    except ItemNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return item.to_dict()


@app.post("/outfits/recommendations", response_model=RecommendationResponse)
async def recommend_outfits(request: RecommendationRequest) -> RecommendationResponse:
    """Rank outfits from the user's wardrobe for the requested occasion."""

    if not stylist_app.list_items(request.user_id):
        raise HTTPException(
            status_code=400,
            detail="No wardrobe items found. Please add some clothing items first.",
        )
    start = time.perf_counter()
    recommendations = stylist_app.recommend(
        user_id=request.user_id,
        occasion=request.occasion,
        season=request.season,
        preferred_colors=request.preferred_colors,
        exclude_item_ids=request.exclude_item_ids,
        include_item_ids=request.include_item_ids,
        max_recommendations=request.max_recommendations,
    )
    return RecommendationResponse(
        recommendations=[outfit.to_dict() for outfit in recommendations],
        total_count=len(recommendations),
        processing_time_ms=round((time.perf_counter() - start) * 1000, 2),
    )


@app.post("/outfits/quick", response_model=RecommendationResponse)
async def quick_outfits(request: QuickSuggestionRequest) -> RecommendationResponse:
    start = time.perf_counter()
    suggestions = stylist_app.quick_suggestions(
        user_id=request.user_id,
        occasion=request.occasion,
        max_suggestions=request.max_suggestions,
    )
    return RecommendationResponse(
        recommendations=[outfit.to_dict() for outfit in suggestions],
        total_count=len(suggestions),
        processing_time_ms=round((time.perf_counter() - start) * 1000, 2),
    )


def get_app() -> FastAPI:
    """Expose the FastAPI instance for ASGI servers."""

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:app", host="0.0.0.0", port=stylist_app.config.port, reload=False)
