"""
Persistable base model for instances produced by factories.

``PersistableModel`` is a Pydantic model that accepts any attributes it is
given, so factories can construct it from schema-less attribute mappings.
Subclasses may declare fields (with their own defaults) as usual; attributes
not declared are kept as extras.

Persisting goes through the process-wide default model repository, which
owns identifier generation. Tests that need an isolated identifier sequence
install their own repository with ``set_default_repository`` (or the
``model_repository`` pytest fixture).
"""

import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from fabricate.repos.memory import MemoryModelRepository
from fabricate.repositories import ModelRepository

logger = logging.getLogger(__name__)

_default_repository: Optional[ModelRepository] = None


def get_default_repository() -> ModelRepository:
    """Return the default model repository, creating it on first use."""
    global _default_repository
    if _default_repository is None:
        _default_repository = MemoryModelRepository()
    return _default_repository


def set_default_repository(
    repository: Optional[ModelRepository],
) -> Optional[ModelRepository]:
    """Install a new default model repository.

    Args:
        repository: Repository to use, or None to fall back to a fresh
            memory repository on next use

    Returns:
        The previously installed repository, so callers can restore it
    """
    global _default_repository
    previous = _default_repository
    _default_repository = repository
    logger.debug(
        "Default model repository replaced",
        extra={
            "repository_type": type(repository).__name__,
            "previous_type": type(previous).__name__,
        },
    )
    return previous


class PersistableModel(BaseModel):
    """Base model for objects created by factories.

    ``id`` stays None until ``persist()`` is called.
    """

    model_config = ConfigDict(extra="allow")

    id: Optional[int] = None

    def get(self, key: str) -> Any:
        """Read an attribute by name, None if it was never set.

        Only stored attributes are read, so an attribute named like a model
        method (``copy``, ``json``, ``persist``) returns its value.
        """
        extra = self.__pydantic_extra__ or {}
        if key in extra:
            return extra[key]
        if key in type(self).model_fields:
            return self.__dict__.get(key)
        return None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def persist(self, repository: Optional[ModelRepository] = None) -> None:
        """Assign an identifier (if unset) and save to the repository.

        Args:
            repository: Repository to save to, the default one when omitted
        """
        if repository is None:
            repository = get_default_repository()

        if self.id is None:
            self.id = repository.generate_id()
        repository.save(self)

        logger.debug(
            "Model persisted",
            extra={"model_type": type(self).__name__, "model_id": self.id},
        )
