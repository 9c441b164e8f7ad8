"""
Database models package.
"""

from petcare.models.feeding import Feeding
from petcare.models.playtime import Playtime

__all__ = ["Feeding", "Playtime"]
