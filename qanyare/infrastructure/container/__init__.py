"""
Dependency injection container
"""

from .dependency_injection import DependencyContainer

__all__ = ["DependencyContainer"]
