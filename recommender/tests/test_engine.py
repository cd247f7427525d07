from __future__ import annotations

import pytest

from recommender.recommendations.config import EngineConfig
from recommender.recommendations.data_store import get_catalog, get_product
from recommender.recommendations.engine import (
    HybridRecommendationEngine,
    collaborative_score,
    content_based_score,
    recency_boost,
)
from recommender.recommendations.models import Product, UserBehavior

TECH_BEHAVIOR = UserBehavior(viewed=[1, 6, 8, 3], purchased=[1, 6], recent_views=["Electronics"])
EMPTY_BEHAVIOR = UserBehavior()


class FixedRandom:
    """Random source that replays the same value forever."""

    def __init__(self, value: float) -> None:
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


class SequenceRandom:
    def __init__(self, values: list[float]) -> None:
        self.values = list(values)

    def random(self) -> float:
        return self.values.pop(0)


def _exploit_engine(**kwargs) -> HybridRecommendationEngine:
    return HybridRecommendationEngine(rng=FixedRandom(0.99), **kwargs)


def _product(pid: int, **overrides) -> Product:
    fields = {
        "id": pid,
        "name": f"Product {pid}",
        "category": "Misc",
        "price": 100,
        "rating": 4.0,
        "tags": [],
        "popularity": 50,
    }
    fields.update(overrides)
    return Product(**fields)


def test_recommend_excludes_purchased():
    engine = _exploit_engine()
    ids = [r.product.id for r in engine.recommend(TECH_BEHAVIOR, limit=10)]
    assert 1 not in ids
    assert 6 not in ids


def test_recommend_excludes_purchased_even_when_exploring():
    engine = HybridRecommendationEngine(rng=FixedRandom(0.0), config=EngineConfig(exploration=1.0))
    behavior = UserBehavior(purchased=[2, 4, 9])
    ids = [r.product.id for r in engine.recommend(behavior, limit=10)]
    assert not {2, 4, 9} & set(ids)


def test_sub_scores_bounded():
    catalog = get_catalog()
    for behavior in (TECH_BEHAVIOR, EMPTY_BEHAVIOR, UserBehavior(viewed=[p.id for p in catalog])):
        viewed = [get_product(pid) for pid in behavior.viewed]
        for product in catalog:
            assert 0.0 <= collaborative_score(viewed, product) <= 1.0
            assert 0.0 <= content_based_score(viewed, product) <= 1.0


def test_content_based_zero_without_views():
    for product in get_catalog():
        assert content_based_score([], product) == 0.0


def test_recency_boost_is_binary():
    for product in get_catalog():
        expected = 0.5 if product.category == "Electronics" else 0.0
        assert recency_boost(TECH_BEHAVIOR, product) == expected


def test_collaborative_category_and_tags():
    viewed = [get_product(pid) for pid in TECH_BEHAVIOR.viewed]
    # Action camera: same category + three shared tags, tag term capped at 0.4
    assert collaborative_score(viewed, get_product(3)) == pytest.approx(0.9)
    # Yoga mat shares nothing with the tech items
    assert collaborative_score(viewed, get_product(7)) == 0.0


def test_content_based_price_and_rating_terms():
    viewed = [get_product(pid) for pid in TECH_BEHAVIOR.viewed]
    avg_price = (299 + 159 + 49 + 399) / 4
    price_term = 0.4 - 0.5 * abs(399 - avg_price) / avg_price
    assert content_based_score(viewed, get_product(3)) == pytest.approx(price_term + 0.3)


def test_tech_scenario_ranks_related_product_higher():
    engine = _exploit_engine()
    scored = {r.product.id: r for r in engine.recommend(TECH_BEHAVIOR, limit=10)}
    assert scored[3].score > scored[7].score
    assert scored[3].components.recency == 0.5
    assert scored[7].components.recency == 0.0


def test_empty_behavior_driven_by_popularity():
    engine = _exploit_engine()
    results = engine.recommend(EMPTY_BEHAVIOR, limit=10)
    assert len(results) == 10
    for rec in results:
        assert rec.components.collaborative == 0.0
        assert rec.components.content_based == 0.0
        assert rec.components.recency == 0.0
        assert rec.components.contextual == pytest.approx(rec.product.popularity / 100 * 0.25)
        assert rec.score == pytest.approx(0.25 * rec.components.contextual)
    popularity = [r.product.popularity for r in results]
    assert popularity == sorted(popularity, reverse=True)


def test_all_purchased_returns_empty():
    engine = _exploit_engine()
    behavior = UserBehavior(purchased=[p.id for p in get_catalog()])
    assert engine.recommend(behavior) == []


def test_recommend_is_repeatable_without_exploration():
    engine = _exploit_engine()
    first = [(r.product.id, r.score) for r in engine.recommend(TECH_BEHAVIOR)]
    second = [(r.product.id, r.score) for r in engine.recommend(TECH_BEHAVIOR)]
    assert first == second


def test_recommend_respects_limit_and_default():
    engine = _exploit_engine()
    assert len(engine.recommend(EMPTY_BEHAVIOR)) == 5
    assert len(engine.recommend(EMPTY_BEHAVIOR, limit=3)) == 3


def test_recommend_non_positive_limit_returns_empty():
    engine = _exploit_engine()
    assert engine.recommend(EMPTY_BEHAVIOR, limit=0) == []
    assert engine.recommend(TECH_BEHAVIOR, limit=-3) == []


def test_exploration_branch_uses_second_draw():
    engine = HybridRecommendationEngine(rng=SequenceRandom([0.05, 0.5]))
    assert engine.contextual_score(get_product(1)) == pytest.approx(0.1)


def test_exploitation_branch_uses_popularity():
    engine = HybridRecommendationEngine(rng=SequenceRandom([0.5]))
    assert engine.contextual_score(get_product(1)) == pytest.approx(0.95 * 0.25)


def test_neural_uses_reported_contextual_score():
    engine = _exploit_engine()
    for rec in engine.recommend(TECH_BEHAVIOR, limit=10):
        c = rec.components
        expected = 0.4 * c.collaborative + 0.35 * c.content_based + 0.25 * c.contextual
        assert c.neural == pytest.approx(expected)
        assert rec.score == pytest.approx(c.neural + c.recency)


def test_zero_score_products_are_dropped():
    catalog = [
        _product(1, category="Books", tags=["novel"], popularity=60),
        _product(2, category="Garden", tags=["soil"], popularity=0, price=10_000, rating=1.0),
    ]
    engine = HybridRecommendationEngine(catalog=catalog, rng=FixedRandom(0.99))
    results = engine.recommend(UserBehavior(viewed=[1], purchased=[1]))
    assert results == []

    results = engine.recommend(UserBehavior())
    assert [r.product.id for r in results] == [1]


def test_ties_keep_catalog_order():
    catalog = [_product(pid, popularity=40) for pid in (5, 3, 9)]
    engine = HybridRecommendationEngine(catalog=catalog, rng=FixedRandom(0.99))
    assert [r.product.id for r in engine.recommend(UserBehavior())] == [5, 3, 9]


def test_unknown_viewed_ids_are_ignored():
    engine = _exploit_engine()
    with_unknown = UserBehavior(viewed=[999, 3], purchased=[1, 6], recent_views=["Electronics"])
    without = UserBehavior(viewed=[3], purchased=[1, 6], recent_views=["Electronics"])
    assert [(r.product.id, r.score) for r in engine.recommend(with_unknown)] == [
        (r.product.id, r.score) for r in engine.recommend(without)
    ]


def test_config_rejects_bad_exploration():
    with pytest.raises(ValueError):
        EngineConfig(exploration=1.5)


def test_config_rejects_non_positive_default_limit():
    with pytest.raises(ValueError):
        EngineConfig(default_limit=0)


def test_config_reads_environment(monkeypatch):
    monkeypatch.setenv("RECOMMENDER_EXPLORATION", "0.35")
    monkeypatch.setenv("RECOMMENDER_DEFAULT_LIMIT", "3")
    config = EngineConfig()
    assert config.exploration == pytest.approx(0.35)
    assert config.default_limit == 3


def test_config_rejects_bad_environment_exploration(monkeypatch):
    monkeypatch.setenv("RECOMMENDER_EXPLORATION", "2")
    with pytest.raises(ValueError):
        EngineConfig()


def test_catalog_products_cannot_be_mutated():
    product = get_product(7)
    with pytest.raises(AttributeError):
        product.tags.append("wireless")
    with pytest.raises(AttributeError):
        product.specs.append("Extra")
    assert "wireless" not in get_product(7).tags

    engine = _exploit_engine()
    scored = {r.product.id: r for r in engine.recommend(UserBehavior(viewed=[8]), limit=10)}
    assert scored[7].components.collaborative == 0.0


def test_unknown_viewed_id_logged_once_per_pass(caplog):
    engine = _exploit_engine()
    behavior = UserBehavior(viewed=[999, 3])
    with caplog.at_level("WARNING", logger="recommender"):
        engine.recommend(behavior, limit=10)
    warnings = [r for r in caplog.records if r.levelname == "WARNING"]
    assert len(warnings) == 1
    assert "1 unknown product id" in warnings[0].getMessage()
