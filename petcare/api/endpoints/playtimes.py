import logging
from fastapi import APIRouter, HTTPException, Depends, Path, Request, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from petcare.core.database import get_db
from petcare.crud import playtime as playtime_crud
from petcare.crud.results import WriteResult
from petcare.schemas.base import MAX_ID
from petcare.schemas.playtime import PlaytimeCreate, PlaytimeUpdate, PlaytimeResponse

router = APIRouter(prefix="/Playtimes", tags=["Playtimes"])
logger = logging.getLogger(__name__)


@router.get("", response_model=list[PlaytimeResponse])
def list_playtimes(db: Session = Depends(get_db)):
    """
    List all playtimes, sorted by id.
    """
    return playtime_crud.get_multi(db)


@router.get("/{playtime_id}", response_model=PlaytimeResponse)
def get_playtime(playtime_id: int = Path(..., le=MAX_ID), db: Session = Depends(get_db)):
    """
    Retrieve a playtime by ID.
    """
    playtime = playtime_crud.get_by_id(db, playtime_id)

    if not playtime:
        raise HTTPException(status_code=404, detail="Playtime not found")

    return playtime


@router.put("/{playtime_id}", status_code=204)
def update_playtime(
    request: PlaytimeUpdate,
    playtime_id: int = Path(..., le=MAX_ID),
    db: Session = Depends(get_db)
):
    """
    Replace a playtime with the record in the request body.

    Returns 204 on success, 400 on id mismatch, 404 if the playtime is gone.
    """
    if request.id != playtime_id:
        raise HTTPException(status_code=400, detail="Playtime id in body does not match URL")

    result = playtime_crud.replace(db, playtime_id, request)

    if result is WriteResult.NOT_FOUND:
        raise HTTPException(status_code=404, detail="Playtime not found")
    if result is WriteResult.CONFLICT:
        logger.error(f"Write conflict updating playtime {playtime_id}")
        raise HTTPException(status_code=500, detail="Playtime was modified concurrently")

    logger.info(f"Updated playtime {playtime_id}")
    return None


@router.post("", status_code=201, response_model=PlaytimeResponse)
def create_playtime(
    request: PlaytimeCreate,
    http_request: Request,
    response: Response,
    db: Session = Depends(get_db)
):
    """
    Create a new playtime. The `Location` header points at the new record.
    """
    try:
        new_playtime = playtime_crud.create(db, request)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating playtime: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to create playtime: {str(e)}")

    response.headers["Location"] = str(http_request.url_for("get_playtime", playtime_id=new_playtime.id))
    logger.info(f"Created playtime {new_playtime.id} for subject {new_playtime.subject_id}")

    return new_playtime


@router.delete("/{playtime_id}", status_code=204)
def delete_playtime(playtime_id: int = Path(..., le=MAX_ID), db: Session = Depends(get_db)):
    """
    Delete a playtime by ID.
    """
    result = playtime_crud.remove(db, playtime_id)

    if result is WriteResult.NOT_FOUND:
        raise HTTPException(status_code=404, detail="Playtime not found")

    logger.info(f"Deleted playtime {playtime_id}")
    return None
