"""
Relational storage: ORM models, engine management and fixture data
"""

from .operations import DatabaseManager

__all__ = ["DatabaseManager"]
