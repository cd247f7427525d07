from __future__ import annotations

from typing import Any

# Behavior ids reference PRODUCT_RECORDS; viewed order is oldest first.
PROFILE_RECORDS: tuple[dict[str, Any], ...] = (
    {
        "id": "user_tech",
        "name": "Tech Enthusiast",
        "avatar": "👨‍💻",
        "behavior": {
            "viewed": [1, 6, 8, 3],
            "purchased": [1, 6],
            "recent_views": ["Electronics"],
        },
    },
    {
        "id": "user_fitness",
        "name": "Fitness Lover",
        "avatar": "🏃",
        "behavior": {
            "viewed": [7, 10, 4, 5],
            "purchased": [],
            "recent_views": ["Wearables", "Sports", "Appliances"],
        },
    },
    {
        "id": "user_office",
        "name": "Office Professional",
        "avatar": "💼",
        "behavior": {
            "viewed": [4, 6, 9, 1],
            "purchased": [4, 9],
            "recent_views": ["Furniture", "Electronics", "Fashion"],
        },
    },
    {
        "id": "user_home",
        "name": "Home Organizer",
        "avatar": "🏠",
        "behavior": {
            "viewed": [10, 5, 4, 9],
            "purchased": [10, 5],
            "recent_views": ["Appliances", "Furniture", "Fashion"],
        },
    },
    {
        "id": "user_explorer",
        "name": "Adventure Seeker",
        "avatar": "🧗",
        "behavior": {
            "viewed": [3, 9, 2, 7],
            "purchased": [3, 9],
            "recent_views": ["Electronics", "Sports", "Fashion"],
        },
    },
)

DEFAULT_PROFILE_ID = PROFILE_RECORDS[0]["id"]
