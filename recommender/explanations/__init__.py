"""
Explanation layer.

Responsibilities:
- Turn a scored product and its sub-scores into a readable sentence.
- Summarise a recommendation set into a one-line insight.
- Label total scores with a confidence level.
"""
