"""
CRUD operations for Playtime model.

Mirrors the feeding repository: same ordering, same replace/remove results.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from petcare.core.logging_config import get_logger
from petcare.crud.results import WriteResult
from petcare.models.playtime import Playtime
from petcare.schemas.playtime import PlaytimeCreate, PlaytimeUpdate

logger = get_logger(__name__)


def create(db: Session, playtime_data: PlaytimeCreate) -> Playtime:
    """
    Create a new playtime in the database.

    Returns:
        Created Playtime instance with its store-assigned id
    """
    db_playtime = Playtime(**playtime_data.model_dump(), version=1)

    db.add(db_playtime)
    db.commit()
    db.refresh(db_playtime)

    return db_playtime


def get_by_id(db: Session, playtime_id: int) -> Optional[Playtime]:
    return db.query(Playtime).filter(Playtime.id == playtime_id).first()


def get_multi(db: Session) -> List[Playtime]:
    """Retrieve every playtime, ordered by id ascending."""
    return db.query(Playtime).order_by(Playtime.id).all()


def exists(db: Session, playtime_id: int) -> bool:
    return db.query(Playtime.id).filter(Playtime.id == playtime_id).first() is not None


def replace(db: Session, playtime_id: int, playtime_data: PlaytimeUpdate) -> WriteResult:
    """
    Replace every field of a stored playtime with the given values.

    Returns:
        OK on commit, NOT_FOUND if the row is gone, CONFLICT on a stale version
    """
    query = db.query(Playtime).filter(Playtime.id == playtime_id)
    if playtime_data.version is not None:
        query = query.filter(Playtime.version == playtime_data.version)

    values = playtime_data.model_dump(exclude={"id", "version"})
    values["version"] = Playtime.version + 1

    updated = query.update(values, synchronize_session=False)
    if updated == 0:
        db.rollback()
        if not exists(db, playtime_id):
            return WriteResult.NOT_FOUND
        logger.warning(f"Stale version {playtime_data.version} for playtime {playtime_id}")
        return WriteResult.CONFLICT

    db.commit()
    return WriteResult.OK


def remove(db: Session, playtime_id: int) -> WriteResult:
    playtime = get_by_id(db, playtime_id)
    if not playtime:
        return WriteResult.NOT_FOUND

    db.delete(playtime)
    db.commit()

    return WriteResult.OK
