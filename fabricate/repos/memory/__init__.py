"""
Memory repository implementations for fabricate.

These implementations use Python dictionaries for storage and are the
default persistence collaborator for ``PersistableModel``.
"""

from .model import MemoryModelRepository

__all__ = [
    "MemoryModelRepository",
]
