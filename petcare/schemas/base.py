from datetime import datetime, timezone
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


# Ids are 32-bit integer columns; larger path ids fail validation with 422
MAX_ID = 2**31 - 1


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    """
    Base for all request/response bodies.

    Fields are snake_case in Python and camelCase on the wire
    (subject_id <-> subjectId). Either spelling is accepted on input.
    """

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True  # Allows conversion from SQLAlchemy models
