from __future__ import annotations

import math
from typing import Sequence

from ..recommendations.behavior import resolve_products
from ..recommendations.models import (
    Product,
    ScoreComponents,
    ScoredRecommendation,
    UserBehavior,
)

CONFIDENCE_LEVELS: list[tuple[float, str]] = [
    (0.7, "Very High"),
    (0.5, "High"),
    (0.3, "Medium"),
]
FALLBACK_CONFIDENCE = "Exploratory"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _format_rating(rating: float) -> str:
    return f"{rating:g}"


def explain(
    product: Product,
    behavior: UserBehavior,
    components: ScoreComponents,
    catalog: Sequence[Product] | None = None,
) -> str:
    """
    Build the explanation for one recommended product.

    Clauses are checked in a fixed order and every one that fires is kept,
    joined with spaces. When none fires a category-popularity clause is used.
    """
    viewed = resolve_products(behavior.viewed, catalog)
    clauses: list[str] = []

    if components.collaborative > 0.2:
        if any(p.category == product.category for p in viewed):
            clauses.append(f"You've shown strong interest in {product.category.lower()} products.")

    if components.content_based > 0.2 and viewed:
        avg_price = sum(p.price for p in viewed) / len(viewed)
        if abs(product.price - avg_price) < 100:
            clauses.append(
                f"This aligns with your price preferences around ${_round_half_up(avg_price)}."
            )

    if product.rating >= 4.5:
        clauses.append(f"With a {_format_rating(product.rating)}⭐ rating, this is highly-rated.")

    viewed_tags = {tag for p in viewed for tag in p.tags}
    matching_tags = [tag for tag in product.tags if tag in viewed_tags]
    if matching_tags:
        clauses.append(f"Matches your interest in {', '.join(matching_tags[:2])}.")

    if components.contextual > 0.15:
        clauses.append("Currently trending among similar users.")

    if not clauses:
        clauses.append(f"Popular in the {product.category} category.")

    return " ".join(clauses)


def insight(recommendations: Sequence[ScoredRecommendation]) -> str:
    """Summarise how many distinct categories a recommendation set spans."""
    categories = list(dict.fromkeys(r.product.category for r in recommendations))
    if len(categories) == 1:
        return f"Strong affinity for {categories[0].lower()}. Specialized selection curated."
    return (
        f"Diverse interests across {len(categories)} categories. "
        "Multi-dimensional recommendations using advanced neural algorithms."
    )


def confidence_level(score: float) -> str:
    for threshold, label in CONFIDENCE_LEVELS:
        if score > threshold:
            return label
    return FALLBACK_CONFIDENCE
