"""
Recommendation core.

Responsibilities:
- Expose the read-only product catalog and user profiles.
- Track per-session user behavior (viewed, purchased, recent categories).
- Score and rank unpurchased catalog products with hybrid heuristics.
- Return structured recommendations ready for API serialisation.
"""
