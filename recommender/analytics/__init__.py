"""
Behavior analytics.

Responsibilities:
- Summarise a session's viewed and purchased products.
- Group products under the user's recently browsed categories.
"""
