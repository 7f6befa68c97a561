"""
Core Services Module

Provides basic CRUD services for fundamental business operations.
These services are suitable for students to learn service patterns
without the complexity of HTTP handling.
"""

from app.services.core.book_service import BookService, book_service

__all__ = ["BookService", "book_service"]
