from __future__ import annotations

from typing import Any

CATEGORIES: tuple[str, ...] = (
    "Electronics",
    "Wearables",
    "Furniture",
    "Appliances",
    "Sports",
    "Fashion",
)

PRODUCT_RECORDS: tuple[dict[str, Any], ...] = (
    {
        "id": 1,
        "name": "Premium Wireless Headphones",
        "category": "Electronics",
        "price": 299,
        "rating": 4.8,
        "tags": ["audio", "wireless", "premium"],
        "description": "Noise-cancelling with 30hr battery",
        "image": "🎧",
        "popularity": 95,
        "specs": ["Active Noise Cancellation", "30h Battery", "Bluetooth 5.0", "Hi-Res Audio"],
        "reviews": 2543,
    },
    {
        "id": 2,
        "name": "Smart Fitness Watch",
        "category": "Wearables",
        "price": 249,
        "rating": 4.6,
        "tags": ["fitness", "smart", "health"],
        "description": "Track your health metrics 24/7",
        "image": "⌚",
        "popularity": 88,
        "specs": ["Heart Rate Monitor", "GPS", "Water Resistant", "7 Day Battery"],
        "reviews": 1856,
    },
    {
        "id": 3,
        "name": "4K Action Camera",
        "category": "Electronics",
        "price": 399,
        "rating": 4.7,
        "tags": ["camera", "sports", "4k"],
        "description": "Waterproof adventure companion",
        "image": "📷",
        "popularity": 82,
        "specs": ["4K 60fps", "Waterproof 30m", "Stabilization", "Voice Control"],
        "reviews": 1234,
    },
    {
        "id": 4,
        "name": "Ergonomic Office Chair",
        "category": "Furniture",
        "price": 449,
        "rating": 4.9,
        "tags": ["office", "ergonomic", "comfort"],
        "description": "All-day comfort for professionals",
        "image": "🪑",
        "popularity": 91,
        "specs": ["Lumbar Support", "Armrest Adjust", "Breathable Mesh", "5 Year Warranty"],
        "reviews": 3421,
    },
    {
        "id": 5,
        "name": "Smart Coffee Maker",
        "category": "Appliances",
        "price": 179,
        "rating": 4.5,
        "tags": ["coffee", "smart", "kitchen"],
        "description": "Brew from your smartphone",
        "image": "☕",
        "popularity": 76,
        "specs": ["WiFi Connected", "Programmable", "12 Cup Capacity", "Thermal Carafe"],
        "reviews": 892,
    },
    {
        "id": 6,
        "name": "Mechanical Keyboard RGB",
        "category": "Electronics",
        "price": 159,
        "rating": 4.7,
        "tags": ["gaming", "keyboard", "rgb"],
        "description": "Cherry MX switches with RGB",
        "image": "⌨️",
        "popularity": 85,
        "specs": ["Cherry MX Switches", "RGB Lighting", "Aluminum Frame", "Programmable"],
        "reviews": 2156,
    },
    {
        "id": 7,
        "name": "Yoga Mat Premium",
        "category": "Sports",
        "price": 79,
        "rating": 4.4,
        "tags": ["fitness", "yoga", "wellness"],
        "description": "Eco-friendly non-slip mat",
        "image": "🧘",
        "popularity": 70,
        "specs": ["Non-slip Surface", "6mm Thickness", "Eco TPE", "Carrying Strap"],
        "reviews": 1023,
    },
    {
        "id": 8,
        "name": "Wireless Charging Pad",
        "category": "Electronics",
        "price": 49,
        "rating": 4.3,
        "tags": ["wireless", "charging", "tech"],
        "description": "Fast charge any Qi device",
        "image": "🔋",
        "popularity": 68,
        "specs": ["15W Fast Charging", "Qi Compatible", "LED Indicator", "Non-slip Base"],
        "reviews": 756,
    },
    {
        "id": 9,
        "name": "Designer Backpack",
        "category": "Fashion",
        "price": 129,
        "rating": 4.6,
        "tags": ["fashion", "travel", "urban"],
        "description": "Water-resistant laptop compartment",
        "image": "🎒",
        "popularity": 79,
        "specs": ["Laptop Pocket", "Water Resistant", "USB Charging Port", "TSA Friendly"],
        "reviews": 1456,
    },
    {
        "id": 10,
        "name": "Air Purifier HEPA",
        "category": "Appliances",
        "price": 299,
        "rating": 4.8,
        "tags": ["health", "air", "home"],
        "description": "Remove 99.97% of pollutants",
        "image": "💨",
        "popularity": 84,
        "specs": ["HEPA Filter", "Smart Control", "Coverage 500 sqft", "3 Speed Modes"],
        "reviews": 2789,
    },
)
