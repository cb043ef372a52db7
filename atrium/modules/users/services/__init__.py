"""
Business Logic Services

Services translate user operations into gateway calls.
"""

from .user_directory import UserDirectoryClient

__all__ = [
    "UserDirectoryClient",
]
