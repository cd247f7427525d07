"""
Static demo data.

Responsibilities:
- Hold the fixed product catalog loaded once at process start.
- Hold the simulated user profiles and their starting behavior.
"""
