"""
Validation package for Lodestar.

This package provides validation utilities for documents handed to Lodestar
from outside, such as maze descriptions.
"""

from .base import ValidationResult
from .schema import MAZE_SCHEMA, MazeSchemaValidator

__all__ = [
    "MAZE_SCHEMA",
    "MazeSchemaValidator",
    "ValidationResult",
]
