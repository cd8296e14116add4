"""
Memory implementation of ModelRepository.

Persisted instances are kept in a dictionary keyed by identifier.
Identifiers come from a counter that only ever moves forward, so every
instance persisted through the same repository gets a strictly greater id
than the one before it, even after ``clear()``.
"""

import itertools
import logging
from typing import Any, Dict, Optional

from fabricate.config import load_settings
from fabricate.repositories import ModelRepository

logger = logging.getLogger(__name__)


class MemoryModelRepository(ModelRepository):
    """
    Memory implementation of ModelRepository using Python dictionaries.

    This provides a lightweight, dependency-free store for instances
    produced by ``create``.
    """

    def __init__(self, start: Optional[int] = None) -> None:
        """Initialize repository with empty in-memory storage.

        Args:
            start: First identifier handed out. Defaults to the configured
                ``FABRICATE_ID_START``.
        """
        if start is None:
            start = load_settings().id_start
        if start < 0:
            raise ValueError(f"Identifier start must be non-negative: {start}")

        self._ids = itertools.count(start)
        self._entities: Dict[int, Any] = {}

        logger.debug(
            "Initializing MemoryModelRepository",
            extra={"id_start": start},
        )

    def generate_id(self) -> int:
        entity_id = next(self._ids)
        logger.debug(
            "MemoryModelRepository: Generated id",
            extra={"entity_id": entity_id},
        )
        return entity_id

    def save(self, entity: Any) -> None:
        """Save an entity under its identifier.

        Args:
            entity: Instance with ``id`` already assigned

        Raises:
            ValueError: If the entity has no identifier
        """
        entity_id = getattr(entity, "id", None)
        if entity_id is None:
            raise ValueError(
                f"Cannot save {type(entity).__name__} without an id"
            )

        self._entities[entity_id] = entity

        logger.debug(
            "MemoryModelRepository: Entity saved",
            extra={
                "entity_id": entity_id,
                "entity_type": type(entity).__name__,
            },
        )

    def get(self, entity_id: int) -> Optional[Any]:
        entity = self._entities.get(entity_id)
        if entity is None:
            logger.debug(
                "MemoryModelRepository: Entity not found",
                extra={"entity_id": entity_id},
            )
        return entity

    def clear(self) -> None:
        logger.debug(
            "MemoryModelRepository: Clearing entities",
            extra={"entity_count": len(self._entities)},
        )
        self._entities.clear()

    def __len__(self) -> int:
        return len(self._entities)
