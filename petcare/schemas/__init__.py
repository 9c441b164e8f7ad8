"""
Request and response schemas.
"""

from petcare.schemas.feeding import FeedingCreate, FeedingUpdate, FeedingResponse
from petcare.schemas.playtime import PlaytimeCreate, PlaytimeUpdate, PlaytimeResponse

__all__ = [
    "FeedingCreate", "FeedingUpdate", "FeedingResponse",
    "PlaytimeCreate", "PlaytimeUpdate", "PlaytimeResponse",
]
