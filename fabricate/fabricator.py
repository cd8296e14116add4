"""
Fabricator: the object test scenarios hold to define and materialize data.

A Fabricator owns one sequence registry and one factory registry wired to
it, and exposes their operations under a single name. Hand a fresh
Fabricator to each independent scenario (the ``fabricator`` pytest fixture
does this) or call ``reset()`` between scenarios; registries are never
shared through module globals.
"""

import logging
from typing import Any, Callable, List, Optional, Type

from fabricate.domain import (
    Attributes,
    Blueprint,
    Sequence,
    empty_attributes,
    identity,
)
from fabricate.factories import DefaultsGenerator, FactoryRegistry, Overrides
from fabricate.sequences import SequenceRegistry

logger = logging.getLogger(__name__)


class Fabricator:
    """Facade over a SequenceRegistry and the FactoryRegistry drawing on it.

    Example:
        >>> fab = Fabricator()
        >>> _ = fab.define_sequence("email", lambda n: f"person{n}@example.com")
        >>> _ = fab.define(
        ...     "user",
        ...     User,
        ...     lambda seq, fac: {"email": seq.next("email")},
        ... )
        >>> fab.build("user").email
        'person1@example.com'
    """

    def __init__(
        self,
        sequences: Optional[SequenceRegistry] = None,
        factories: Optional[FactoryRegistry] = None,
    ) -> None:
        if sequences is None and factories is not None:
            sequences = factories.sequences
        self.sequences = (
            sequences if sequences is not None else SequenceRegistry()
        )
        self.factories = (
            factories
            if factories is not None
            else FactoryRegistry(self.sequences)
        )
        if self.factories.sequences is not self.sequences:
            raise ValueError(
                "Factory registry must draw on the fabricator's sequence "
                "registry"
            )

    def define_sequence(
        self, name: str, generator: Callable[[int], Any] = identity
    ) -> Sequence:
        return self.sequences.define_sequence(name, generator)

    def next(self, name: str) -> Any:
        return self.sequences.next(name)

    def define(
        self,
        name: str,
        target_type: Type[Any],
        defaults_generator: DefaultsGenerator = empty_attributes,
    ) -> Blueprint:
        return self.factories.define(name, target_type, defaults_generator)

    def attributes_for(
        self, name: str, overrides: Optional[Overrides] = None
    ) -> Attributes:
        return self.factories.attributes_for(name, overrides)

    def build(self, name: str, overrides: Optional[Overrides] = None) -> Any:
        return self.factories.build(name, overrides)

    def create(self, name: str, overrides: Optional[Overrides] = None) -> Any:
        return self.factories.create(name, overrides)

    def build_list(
        self, name: str, count: int, overrides: Optional[Overrides] = None
    ) -> List[Any]:
        return self.factories.build_list(name, count, overrides)

    def create_list(
        self, name: str, count: int, overrides: Optional[Overrides] = None
    ) -> List[Any]:
        return self.factories.create_list(name, count, overrides)

    def reset(self) -> None:
        """Forget every factory and sequence."""
        logger.debug(
            "Resetting fabricator",
            extra={
                "factory_count": len(self.factories),
                "sequence_count": len(self.sequences),
            },
        )
        self.factories.reset()
        self.sequences.reset()
