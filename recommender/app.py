from __future__ import annotations

import logging
import os

from fastapi import FastAPI, HTTPException, Query, Request
from pydantic import ValidationError
from starlette.middleware.sessions import SessionMiddleware

from .analytics.summary import summarize_behavior
from .catalog.profiles import DEFAULT_PROFILE_ID
from .explanations.generator import confidence_level, explain, insight
from .recommendations.behavior import behavior_for_profile, record_view
from .recommendations.data_store import get_dataframe, get_product, get_profiles
from .recommendations.engine import HybridRecommendationEngine
from .recommendations.models import (
    BehaviorResponse,
    Product,
    RecommendationItem,
    RecommendationResponse,
    UserBehavior,
)

logger = logging.getLogger(__name__)

SESSION_SECRET = os.environ.get("SESSION_SECRET", "recommender-demo-secret-change-in-production")

app = FastAPI(title="Product Recommendation Demo API", version="1.0.0")
app.add_middleware(SessionMiddleware, secret_key=SESSION_SECRET)

engine = HybridRecommendationEngine()


def _session_state(request: Request) -> tuple[str, UserBehavior]:
    """
    Return the session's selected profile and behavior.

    No or unknown profile means the first profile. Missing or unreadable
    behavior falls back to the selected profile's starting behavior.
    """
    user_id = request.session.get("user_id", DEFAULT_PROFILE_ID)
    if user_id not in get_profiles():
        user_id = DEFAULT_PROFILE_ID

    raw = request.session.get("behavior")
    if raw:
        try:
            return user_id, UserBehavior(**raw)
        except (TypeError, ValidationError):
            logger.warning("Discarding unreadable session behavior for %s", user_id)
    return user_id, behavior_for_profile(user_id)


def _save_state(request: Request, user_id: str, behavior: UserBehavior) -> None:
    request.session["user_id"] = user_id
    request.session["behavior"] = behavior.model_dump()


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    df = get_dataframe()
    return {
        "categories": sorted(df["category"].unique().tolist()),
        "price_range": {"min": float(df["price"].min()), "max": float(df["price"].max())},
        "total_products": len(df),
    }


@app.get("/users")
def users() -> list[dict]:
    return [
        {"id": p.id, "name": p.name, "avatar": p.avatar}
        for p in get_profiles().values()
    ]


@app.get("/products/{product_id}", response_model=Product)
def product_detail(product_id: int) -> Product:
    product = get_product(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


# ── Session endpoints ────────────────────────────────────────────────────


@app.post("/users/{user_id}/select", response_model=BehaviorResponse)
def select_user(user_id: str, request: Request) -> BehaviorResponse:
    behavior = behavior_for_profile(user_id)
    if behavior is None:
        raise HTTPException(status_code=404, detail="Unknown user profile")
    _save_state(request, user_id, behavior)
    return BehaviorResponse(user_id=user_id, behavior=behavior)


@app.get("/behavior", response_model=BehaviorResponse)
def current_behavior(request: Request) -> BehaviorResponse:
    user_id, behavior = _session_state(request)
    return BehaviorResponse(user_id=user_id, behavior=behavior)


@app.post("/products/{product_id}/view", response_model=BehaviorResponse)
def mark_viewed(product_id: int, request: Request) -> BehaviorResponse:
    if get_product(product_id) is None:
        logger.warning("View event for unknown product id %s", product_id)
        raise HTTPException(status_code=404, detail="Product not found")

    user_id, behavior = _session_state(request)
    behavior = record_view(behavior, product_id)
    _save_state(request, user_id, behavior)
    return BehaviorResponse(user_id=user_id, behavior=behavior)


@app.get("/recommendations", response_model=RecommendationResponse)
def recommendations(
    request: Request,
    limit: int = Query(default=engine.config.default_limit, ge=1, le=10),
) -> RecommendationResponse:
    user_id, behavior = _session_state(request)
    ranked = engine.recommend(behavior, limit)

    items = [
        RecommendationItem(
            product=rec.product,
            score=round(rec.score, 4),
            components=rec.components,
            confidence=confidence_level(rec.score),
            explanation=explain(rec.product, behavior, rec.components, engine.catalog),
        )
        for rec in ranked
    ]
    return RecommendationResponse(
        user_id=user_id,
        recommendations=items,
        insight=insight(ranked),
    )


@app.get("/analytics")
def analytics(request: Request) -> dict:
    user_id, behavior = _session_state(request)
    return {"user_id": user_id, **summarize_behavior(behavior)}
