"""
Error types and runtime validation for factory definitions and instances.

This module provides:

- The exception hierarchy raised by the sequence and factory registries.
  Messages are fixed templates so that tests can assert on them.
- Factory name validation against the simple identifier pattern.
- Persistable-instance validation using Python's built-in ``isinstance()``
  with ``@runtime_checkable`` protocols, the same way repository contracts
  are validated.

The goal is to catch definition and collaborator errors at the registry
boundary, before a half-materialized instance can reach a test.
"""

import logging
import re
from typing import Any

from fabricate.repositories import Persistable

logger = logging.getLogger(__name__)

FACTORY_NAME_PATTERN = re.compile(r"[A-Za-z0-9_]+")


class FabricateError(Exception):
    """Base class for errors raised by the factory and sequence registries"""

    pass


class InvalidFactoryNameError(FabricateError):
    """Raised when a factory name contains characters outside
    ``[A-Za-z0-9_]``"""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            "Factory name should not contain spaces or other funky characters"
        )


class UndefinedFactoryError(FabricateError):
    """Raised when materializing from a factory that was never defined"""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Factory with name {name} does not exist")


class UndefinedSequenceError(FabricateError):
    """Raised when drawing from a sequence that was never defined"""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Sequence with name {name} does not exist")


class PersistenceError(FabricateError):
    """Raised when a created instance cannot be persisted"""

    pass


def validate_factory_name(name: str) -> None:
    """
    Validate that a factory name is a simple identifier.

    Args:
        name: The factory name to validate

    Raises:
        InvalidFactoryNameError: If the name is empty or contains spaces or
            any character other than letters, digits and underscores
    """
    valid = isinstance(name, str) and FACTORY_NAME_PATTERN.fullmatch(name)
    if not valid:
        logger.warning(
            "Factory name validation failed",
            extra={"factory_name": name},
        )
        raise InvalidFactoryNameError(name)


def ensure_persistable(instance: Any, factory_name: str) -> Persistable:
    """
    Validate and return an instance that satisfies the Persistable protocol.

    Args:
        instance: The freshly constructed instance
        factory_name: Name of the factory that produced it, for the message

    Returns:
        The same instance (type checker knows it is Persistable)

    Raises:
        PersistenceError: If the instance has no callable ``persist``
    """
    if not isinstance(instance, Persistable):
        error_message = (
            f"Factory {factory_name} produced {type(instance).__name__}, "
            "which does not implement persist()"
        )
        logger.error(
            "Persistable protocol validation failed",
            extra={
                "factory_name": factory_name,
                "instance_type": type(instance).__name__,
            },
        )
        raise PersistenceError(error_message)

    return instance


def ensure_identifier_assigned(instance: Any, factory_name: str) -> Any:
    """
    Validate that ``persist()`` left an identifier on the instance.

    Args:
        instance: The persisted instance
        factory_name: Name of the factory that produced it, for the message

    Returns:
        The identifier read back from the instance

    Raises:
        PersistenceError: If the instance has no ``id`` or it is still None
    """
    identifier = getattr(instance, "id", None)
    if identifier is None:
        logger.error(
            "Persisted instance has no identifier",
            extra={
                "factory_name": factory_name,
                "instance_type": type(instance).__name__,
            },
        )
        raise PersistenceError(
            f"Factory {factory_name} persisted {type(instance).__name__} "
            "without assigning an id"
        )
    return identifier
