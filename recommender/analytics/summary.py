from __future__ import annotations

from collections import Counter
from typing import Any

from ..recommendations.behavior import resolve_products
from ..recommendations.data_store import get_dataframe
from ..recommendations.models import UserBehavior


def _product_rows(product_ids: list[int]) -> list[dict[str, Any]]:
    return [
        {"id": p.id, "name": p.name, "category": p.category, "price": p.price, "rating": p.rating}
        for p in resolve_products(product_ids)
    ]


def category_products(behavior: UserBehavior) -> list[dict[str, Any]]:
    """Viewed or purchased products under each recently browsed category."""
    df = get_dataframe()
    touched = set(behavior.viewed) | set(behavior.purchased)

    rows: list[dict[str, Any]] = []
    for category in behavior.recent_views:
        matches = df[(df["category"] == category) & df["id"].isin(touched)]
        rows.extend(
            {
                "id": int(r["id"]),
                "name": r["name"],
                "category": r["category"],
                "price": float(r["price"]),
                "rating": float(r["rating"]),
            }
            for _, r in matches.iterrows()
        )
    return rows


def summarize_behavior(behavior: UserBehavior) -> dict[str, Any]:
    viewed = _product_rows(behavior.viewed)
    purchased = _product_rows(behavior.purchased)
    by_category = category_products(behavior)

    # Viewed products per category
    category_counter: Counter[str] = Counter(p["category"] for p in viewed)
    prices = [p["price"] for p in viewed]

    return {
        "viewed": viewed,
        "purchased": purchased,
        "categories": by_category,
        "counts": {
            "viewed": len(viewed),
            "purchased": len(purchased),
            "categories": len(behavior.recent_views),
        },
        "viewed_by_category": dict(category_counter.most_common()),
        "avg_viewed_price": round(sum(prices) / len(prices), 2) if prices else 0.0,
    }
