"""
CRUD operations (Create, Read, Update, Delete) for database models.

This layer provides a clean separation between API routes and database operations,
following the Repository pattern.
"""

from petcare.crud import feeding, playtime
from petcare.crud.results import WriteResult

__all__ = ["feeding", "playtime", "WriteResult"]
