"""
Models package.

Import all models here so they are registered with SQLAlchemy.
This file also makes it easy to import models from one place.
"""

from app.models.advocate import Advocate

# Export all models
__all__ = [
    "Advocate",
]
