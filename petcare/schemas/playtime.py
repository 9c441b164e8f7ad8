from pydantic import Field
from typing import Optional
from datetime import datetime

from petcare.schemas.base import CamelModel, utc_now


class PlaytimeBase(CamelModel):
    """Fields shared by every playtime payload"""
    subject_id: int
    started_at: datetime = Field(default_factory=utc_now)
    duration_minutes: Optional[int] = None
    activity: Optional[str] = None
    notes: Optional[str] = None


class PlaytimeCreate(PlaytimeBase):
    """Schema for creating a playtime. Any id in the body is ignored."""
    pass


class PlaytimeUpdate(PlaytimeBase):
    """Schema for replacing a playtime; same id/version rules as feedings"""
    id: Optional[int] = None
    version: Optional[int] = None


class PlaytimeResponse(PlaytimeBase):
    """Schema for playtime response"""
    id: int
    version: int
