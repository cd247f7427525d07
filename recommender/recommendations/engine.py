"""
Hybrid recommendation engine.

Each unpurchased catalog product is scored with four sub-scores:

* collaborative - category and tag overlap with the products the user viewed
* content-based - price and rating affinity with the viewed products
* contextual    - an epsilon-greedy bandit over product popularity
* recency       - a flat boost for categories the user browsed recently

The first three are blended into the "neural" score; the recency boost is
added on top to give the total rank score. Only the contextual score is
stochastic, and its random source is injected so ranking can be made
deterministic in tests.
"""
from __future__ import annotations

import logging
import random
from typing import Protocol, Sequence

from .behavior import resolve_products
from .config import DEFAULT_ENGINE_CONFIG, EngineConfig
from .data_store import get_catalog
from .models import Product, ScoreComponents, ScoredRecommendation, UserBehavior

logger = logging.getLogger(__name__)

_PURCHASED_SENTINEL = -1.0


class RandomSource(Protocol):
    def random(self) -> float: ...


def collaborative_score(viewed: Sequence[Product], product: Product) -> float:
    score = 0.0
    if any(p.category == product.category for p in viewed):
        score += 0.5

    viewed_tags = {tag for p in viewed for tag in p.tags}
    common_tags = sum(1 for tag in product.tags if tag in viewed_tags)
    score += min(common_tags * 0.2, 0.4)

    return min(score, 1.0)


def content_based_score(viewed: Sequence[Product], product: Product) -> float:
    if not viewed:
        return 0.0

    avg_price = sum(p.price for p in viewed) / len(viewed)
    price_diff = abs(product.price - avg_price) / avg_price
    score = max(0.0, 0.4 - price_diff * 0.5)

    avg_rating = sum(p.rating for p in viewed) / len(viewed)
    if product.rating >= avg_rating - 0.2:
        score += 0.3

    return min(score, 1.0)


def recency_boost(behavior: UserBehavior, product: Product, boost: float = 0.5) -> float:
    return boost if product.category in behavior.recent_views else 0.0


class HybridRecommendationEngine:
    """Stateless scorer over a read-only catalog."""

    def __init__(
        self,
        catalog: Sequence[Product] | None = None,
        config: EngineConfig = DEFAULT_ENGINE_CONFIG,
        rng: RandomSource | None = None,
    ) -> None:
        self.catalog: tuple[Product, ...] = tuple(catalog) if catalog is not None else get_catalog()
        self.config = config
        self.rng: RandomSource = rng if rng is not None else random.Random()

    def viewed_products(self, behavior: UserBehavior) -> list[Product]:
        return resolve_products(behavior.viewed, self.catalog)

    def contextual_score(self, product: Product) -> float:
        """Epsilon-greedy draw: explore uniformly, otherwise exploit popularity."""
        if self.rng.random() < self.config.exploration:
            value = self.rng.random() * self.config.exploration_range
            logger.debug("Exploration draw for product %s: %.4f", product.id, value)
            return value
        return product.popularity / 100 * self.config.popularity_weight

    def neural_score(self, collaborative: float, content_based: float, contextual: float) -> float:
        cfg = self.config
        return (
            collaborative * cfg.collaborative_weight
            + content_based * cfg.content_weight
            + contextual * cfg.contextual_weight
        )

    def score_product(
        self,
        behavior: UserBehavior,
        product: Product,
        viewed: Sequence[Product] | None = None,
    ) -> ScoredRecommendation:
        if product.id in behavior.purchased:
            return ScoredRecommendation(
                product=product, score=_PURCHASED_SENTINEL, components=ScoreComponents(),
            )

        if viewed is None:
            viewed = self.viewed_products(behavior)

        cf = collaborative_score(viewed, product)
        cb = content_based_score(viewed, product)
        ctx = self.contextual_score(product)
        nn = self.neural_score(cf, cb, ctx)
        boost = recency_boost(behavior, product, self.config.recency_boost)

        return ScoredRecommendation(
            product=product,
            score=nn + boost,
            components=ScoreComponents(
                collaborative=cf,
                content_based=cb,
                contextual=ctx,
                neural=nn,
                recency=boost,
            ),
        )

    def recommend(self, behavior: UserBehavior, limit: int | None = None) -> list[ScoredRecommendation]:
        """
        Rank every unpurchased catalog product for ``behavior``.

        Products with a total score of 0 or less are dropped. Ties keep
        catalog order. Returns at most ``limit`` entries (config default
        when omitted); an empty list when nothing qualifies or ``limit``
        is 0 or less.
        """
        if limit is None:
            limit = self.config.default_limit

        viewed = self.viewed_products(behavior)
        if len(viewed) < len(behavior.viewed):
            logger.warning(
                "Behavior references %d unknown product id(s); ignoring",
                len(behavior.viewed) - len(viewed),
            )
        scored = [self.score_product(behavior, product, viewed) for product in self.catalog]

        ranked = sorted((s for s in scored if s.score > 0), key=lambda s: s.score, reverse=True)
        logger.debug(
            "Scored %d products (%d eligible) for %d viewed items",
            len(scored), len(ranked), len(viewed),
        )
        return ranked[:max(limit, 0)]
