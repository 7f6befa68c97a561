"""
API Dependencies

Provides dependency injection for services and database sessions.
This centralizes service lookup for API endpoints so tests can override it.
"""

from app.db.session import get_db
from app.services.core import BookService, book_service

__all__ = ["get_db", "get_book_service"]


def get_book_service() -> BookService:
    """
    Get Book Service instance

    Returns:
        BookService: Shared stateless book service
    """
    return book_service
