import logging
from fastapi import APIRouter, HTTPException, Depends, Path, Request, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from petcare.core.database import get_db
from petcare.crud import feeding as feeding_crud
from petcare.crud.results import WriteResult
from petcare.schemas.base import MAX_ID
from petcare.schemas.feeding import FeedingCreate, FeedingUpdate, FeedingResponse

router = APIRouter(prefix="/Feedings", tags=["Feedings"])
logger = logging.getLogger(__name__)


@router.get("", response_model=list[FeedingResponse])
def list_feedings(db: Session = Depends(get_db)):
    """
    List all feedings, sorted by id.
    """
    return feeding_crud.get_multi(db)


@router.get("/{feeding_id}", response_model=FeedingResponse)
def get_feeding(feeding_id: int = Path(..., le=MAX_ID), db: Session = Depends(get_db)):
    """
    Retrieve a feeding by ID.
    """
    feeding = feeding_crud.get_by_id(db, feeding_id)

    if not feeding:
        raise HTTPException(status_code=404, detail="Feeding not found")

    return feeding


@router.put("/{feeding_id}", status_code=204)
def update_feeding(
    request: FeedingUpdate,
    feeding_id: int = Path(..., le=MAX_ID),
    db: Session = Depends(get_db)
):
    """
    Replace a feeding with the record in the request body.

    The body must carry the same `id` as the URL. Send the `version` from a
    previous read to reject the write if someone else changed the record
    in between.

    Returns 204 on success, 400 on id mismatch, 404 if the feeding is gone.
    """
    if request.id != feeding_id:
        raise HTTPException(status_code=400, detail="Feeding id in body does not match URL")

    result = feeding_crud.replace(db, feeding_id, request)

    if result is WriteResult.NOT_FOUND:
        raise HTTPException(status_code=404, detail="Feeding not found")
    if result is WriteResult.CONFLICT:
        logger.error(f"Write conflict updating feeding {feeding_id}")
        raise HTTPException(status_code=500, detail="Feeding was modified concurrently")

    logger.info(f"Updated feeding {feeding_id}")
    return None


@router.post("", status_code=201, response_model=FeedingResponse)
def create_feeding(
    request: FeedingCreate,
    http_request: Request,
    response: Response,
    db: Session = Depends(get_db)
):
    """
    Create a new feeding.

    The id is assigned by the database. The `Location` header points at
    GET /Feedings/{id} for the new record.
    """
    try:
        new_feeding = feeding_crud.create(db, request)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating feeding: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to create feeding: {str(e)}")

    response.headers["Location"] = str(http_request.url_for("get_feeding", feeding_id=new_feeding.id))
    logger.info(f"Created feeding {new_feeding.id} for subject {new_feeding.subject_id}")

    return new_feeding


@router.delete("/{feeding_id}", status_code=204)
def delete_feeding(feeding_id: int = Path(..., le=MAX_ID), db: Session = Depends(get_db)):
    """
    Delete a feeding by ID.
    """
    result = feeding_crud.remove(db, feeding_id)

    if result is WriteResult.NOT_FOUND:
        raise HTTPException(status_code=404, detail="Feeding not found")

    logger.info(f"Deleted feeding {feeding_id}")
    return None
