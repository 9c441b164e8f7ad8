from sqlalchemy import Column, Integer, String, DateTime, func
from petcare.core.database import Base


class Playtime(Base):
    """
    A single play session for a pet.
    Same lifecycle and versioning as Feeding.
    """
    __tablename__ = "playtimes"

    id = Column(Integer, primary_key=True, index=True)
    subject_id = Column(Integer, nullable=False, index=True)
    started_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    duration_minutes = Column(Integer, nullable=True)
    activity = Column(String, nullable=True)
    notes = Column(String, nullable=True)

    version = Column(Integer, nullable=False, default=1)

    def __repr__(self):
        return f"<Playtime(id={self.id}, subject_id={self.subject_id}, duration_minutes={self.duration_minutes})>"
