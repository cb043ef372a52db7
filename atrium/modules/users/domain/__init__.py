"""
Domain Models

Value objects exchanged with the user resource collection.
"""

from .user import UserRecord

__all__ = [
    "UserRecord",
]
