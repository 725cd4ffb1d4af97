"""
Linear console demos that tie loaders, models, and reports together.
"""

from . import issues, reporting, sentiment, taxi

__all__ = ["issues", "reporting", "sentiment", "taxi"]
