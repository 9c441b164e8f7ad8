from sqlalchemy import Column, Integer, String, Float, DateTime, func
from petcare.core.database import Base


class Feeding(Base):
    """
    A single feeding event for a pet.

    `version` is the optimistic-concurrency token: it starts at 1 and is
    bumped by every successful replace.
    """
    __tablename__ = "feedings"

    id = Column(Integer, primary_key=True, index=True)
    subject_id = Column(Integer, nullable=False, index=True)
    fed_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    amount = Column(Float, nullable=True)
    food_type = Column(String, nullable=True)
    notes = Column(String, nullable=True)

    version = Column(Integer, nullable=False, default=1)

    def __repr__(self):
        return f"<Feeding(id={self.id}, subject_id={self.subject_id}, amount={self.amount})>"
