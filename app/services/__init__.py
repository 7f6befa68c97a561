"""
Services Layer

Provides business logic services for the record examples.
Core services handle basic CRUD operations suitable for students learning.
"""

__all__ = []
