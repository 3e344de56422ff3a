"""
CRUD operations (Create, Read, Update, Delete) for database models.

This layer provides a clean separation between the service layer and database operations,
following the Repository pattern.
"""

from app.crud import employee

__all__ = ["employee"]
