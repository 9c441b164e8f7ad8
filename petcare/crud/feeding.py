"""
CRUD operations for Feeding model.

Implements the Repository pattern to encapsulate all database operations
for feedings, providing a clean interface for the API layer.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from petcare.core.logging_config import get_logger
from petcare.crud.results import WriteResult
from petcare.models.feeding import Feeding
from petcare.schemas.feeding import FeedingCreate, FeedingUpdate

logger = get_logger(__name__)


def create(db: Session, feeding_data: FeedingCreate) -> Feeding:
    """
    Create a new feeding in the database.

    Args:
        db: Database session
        feeding_data: Validated feeding data

    Returns:
        Created Feeding instance with its store-assigned id
    """
    db_feeding = Feeding(**feeding_data.model_dump(), version=1)

    db.add(db_feeding)
    db.commit()
    db.refresh(db_feeding)

    return db_feeding


def get_by_id(db: Session, feeding_id: int) -> Optional[Feeding]:
    """
    Retrieve a feeding by its ID.

    Returns:
        Feeding instance if found, None otherwise
    """
    return db.query(Feeding).filter(Feeding.id == feeding_id).first()


def get_multi(db: Session) -> List[Feeding]:
    """Retrieve every feeding, ordered by id ascending."""
    return db.query(Feeding).order_by(Feeding.id).all()


def exists(db: Session, feeding_id: int) -> bool:
    return db.query(Feeding.id).filter(Feeding.id == feeding_id).first() is not None


def replace(db: Session, feeding_id: int, feeding_data: FeedingUpdate) -> WriteResult:
    """
    Replace every field of a stored feeding with the given values.

    Fields missing from `feeding_data` are reset to their defaults. When
    `feeding_data.version` is set, the row is only written if its stored
    version still matches.

    Args:
        db: Database session
        feeding_id: Feeding ID to replace
        feeding_data: Complete new record

    Returns:
        OK on commit, NOT_FOUND if the row is gone, CONFLICT if it exists
        but changed underneath the caller
    """
    query = db.query(Feeding).filter(Feeding.id == feeding_id)
    if feeding_data.version is not None:
        query = query.filter(Feeding.version == feeding_data.version)

    values = feeding_data.model_dump(exclude={"id", "version"})
    values["version"] = Feeding.version + 1

    updated = query.update(values, synchronize_session=False)
    if updated == 0:
        db.rollback()
        if not exists(db, feeding_id):
            return WriteResult.NOT_FOUND
        logger.warning(f"Stale version {feeding_data.version} for feeding {feeding_id}")
        return WriteResult.CONFLICT

    db.commit()
    return WriteResult.OK


def remove(db: Session, feeding_id: int) -> WriteResult:
    """
    Delete a feeding by ID.

    Returns:
        OK if deleted, NOT_FOUND if there was nothing to delete
    """
    feeding = get_by_id(db, feeding_id)
    if not feeding:
        return WriteResult.NOT_FOUND

    db.delete(feeding)
    db.commit()

    return WriteResult.OK
