"""
Persistence interfaces defined as Protocols.

The factory registry never talks to a store directly. It constructs an
instance and, for ``create`` only, asks the instance to persist itself. The
instance in turn delegates to a model repository, which owns identifier
generation.

Architectural Notes:

- These are pure interfaces with no implementation details
- Operations are synchronous; there is no async persistence
- Identifiers are integers, strictly increasing across the whole process
  for a given repository
- Use the memory implementation in ``fabricate.repos.memory`` for tests,
  or any object that satisfies the same contract
"""

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class Persistable(Protocol):
    """Contract an instance must satisfy to be produced by ``create``.

    Besides ``persist()``, the factory registry reads back ``id`` after
    persisting. ``id`` must be None (or absent) until the first persist.
    """

    def persist(self) -> None:
        """Save the instance and assign it an identifier.

        Implementation Notes:

        - Must assign a previously unset identifier to ``self.id``
        - Identifiers must increase strictly across calls
        - Calling persist again on an already persisted instance must keep
          its identifier
        """
        ...


@runtime_checkable
class ModelRepository(Protocol):
    """Stores persisted model instances and hands out their identifiers.

    The protocol lets ``PersistableModel`` work with any store, and lets
    tests swap in a fresh repository to isolate identifier sequences.
    """

    def generate_id(self) -> int:
        """Generate the next identifier.

        Returns:
            An integer strictly greater than every identifier this
            repository generated before
        """
        ...

    def save(self, entity: Any) -> None:
        """Save an entity that already carries an identifier.

        Args:
            entity: Instance with ``id`` set
        """
        ...

    def get(self, entity_id: int) -> Optional[Any]:
        """Retrieve a saved entity.

        Args:
            entity_id: Identifier assigned by ``generate_id``

        Returns:
            The entity if found, None otherwise
        """
        ...

    def clear(self) -> None:
        """Forget every saved entity. The identifier counter is kept."""
        ...
