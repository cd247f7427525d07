from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class EngineConfig:
    exploration: float = field(
        default_factory=lambda: float(os.getenv("RECOMMENDER_EXPLORATION", "0.1"))
    )
    exploration_range: float = 0.2
    popularity_weight: float = 0.25
    collaborative_weight: float = 0.4
    content_weight: float = 0.35
    contextual_weight: float = 0.25
    recency_boost: float = 0.5
    default_limit: int = field(
        default_factory=lambda: int(os.getenv("RECOMMENDER_DEFAULT_LIMIT", "5"))
    )

    def __post_init__(self) -> None:
        if not 0.0 <= self.exploration <= 1.0:
            raise ValueError(f"exploration must be within [0, 1], got {self.exploration}")
        if self.default_limit < 1:
            raise ValueError(f"default_limit must be positive, got {self.default_limit}")


DEFAULT_ENGINE_CONFIG = EngineConfig()
