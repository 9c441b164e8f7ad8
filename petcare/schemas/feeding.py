from pydantic import Field
from typing import Optional
from datetime import datetime

from petcare.schemas.base import CamelModel, utc_now


class FeedingBase(CamelModel):
    """Fields shared by every feeding payload"""
    subject_id: int
    fed_at: datetime = Field(default_factory=utc_now)
    amount: Optional[float] = None
    food_type: Optional[str] = None
    notes: Optional[str] = None


class FeedingCreate(FeedingBase):
    """Schema for creating a feeding. Any id in the body is ignored."""
    pass


class FeedingUpdate(FeedingBase):
    """
    Schema for replacing a feeding.

    `id` must match the id in the URL. `version`, when given, must match the
    stored version or the write is rejected as a conflict.
    """
    id: Optional[int] = None
    version: Optional[int] = None


class FeedingResponse(FeedingBase):
    """Schema for feeding response"""
    id: int
    version: int
