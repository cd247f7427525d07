from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _dedupe(values: list) -> list:
    """Drop repeated entries, keeping first-seen order."""
    return list(dict.fromkeys(values))


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    category: str
    price: float = Field(..., gt=0)
    rating: float = Field(..., ge=0.0, le=5.0)
    tags: tuple[str, ...] = ()
    popularity: float = Field(..., ge=0.0, le=100.0)
    reviews: int = Field(default=0, ge=0)
    description: str = ""
    image: str = ""
    specs: tuple[str, ...] = ()


class UserBehavior(BaseModel):
    viewed: list[int] = Field(default_factory=list, description="Oldest view first")
    purchased: list[int] = Field(default_factory=list)
    recent_views: list[str] = Field(default_factory=list)

    @field_validator("viewed", "purchased", "recent_views")
    @classmethod
    def _no_duplicates(cls, values: list) -> list:
        return _dedupe(values)


class UserProfile(BaseModel):
    id: str
    name: str
    avatar: str = ""
    behavior: UserBehavior


class ScoreComponents(BaseModel):
    collaborative: float = 0.0
    content_based: float = 0.0
    contextual: float = 0.0
    neural: float = 0.0
    recency: float = 0.0


class ScoredRecommendation(BaseModel):
    product: Product
    score: float
    components: ScoreComponents


class RecommendationItem(BaseModel):
    product: Product
    score: float
    components: ScoreComponents
    confidence: str
    explanation: str


class RecommendationResponse(BaseModel):
    user_id: str
    recommendations: list[RecommendationItem]
    insight: str


class BehaviorResponse(BaseModel):
    user_id: str
    behavior: UserBehavior
