"""
Domain models and value objects.

Contains the fundamental value type of the library: Vector.
"""

from src.core.domain.vector import Vector

__all__ = [
    # Vector model
    "Vector",
]
