"""
Factory registry: named blueprints materialized into test instances.

Materialization follows the same steps for every operation:

1. Look up the blueprint by name
2. Call its defaults generator with the sequence registry and this
   factory registry (which may advance sequences or materialize nested
   instances)
3. Evaluate the overrides, if any, and merge them over the defaults
4. Construct ``target_type(**attributes)``
5. For ``create`` only: persist the instance and read back its identifier

Any error raised along the way propagates to the caller; no partially
materialized instance is ever returned. Recursive blueprints are allowed
and are not checked for cycles, so a blueprint that (directly or through
another) materializes itself ends in ``RecursionError``.
"""

import logging
from typing import (
    Any,
    Callable,
    Dict,
    List,
    Mapping,
    Optional,
    Type,
    Union,
)

from fabricate.domain import Attributes, Blueprint, empty_attributes
from fabricate.sequences import SequenceRegistry
from fabricate.validation import (
    UndefinedFactoryError,
    ensure_identifier_assigned,
    ensure_persistable,
    validate_factory_name,
)

logger = logging.getLogger(__name__)

DefaultsGenerator = Callable[
    [SequenceRegistry, "FactoryRegistry"], Mapping[str, Any]
]
OverridesGenerator = Callable[
    [SequenceRegistry, "FactoryRegistry"], Mapping[str, Any]
]
# Either a ready mapping or a generator evaluated once per instance
Overrides = Union[Mapping[str, Any], OverridesGenerator]


class FactoryRegistry:
    """
    Registry of named blueprints backed by a Python dictionary.

    Blueprint generators receive ``(sequences, factories)`` explicitly
    rather than reaching for module globals, so nested materializations
    always go through the registries that started them.
    """

    def __init__(self, sequences: Optional[SequenceRegistry] = None) -> None:
        self.sequences = (
            sequences if sequences is not None else SequenceRegistry()
        )
        self._blueprints: Dict[str, Blueprint] = {}

    def define(
        self,
        name: str,
        target_type: Type[Any],
        defaults_generator: DefaultsGenerator = empty_attributes,
    ) -> Blueprint:
        """Register (or replace) a blueprint.

        Args:
            name: Factory name, letters, digits and underscores only
            target_type: Class instantiated with the merged attributes
            defaults_generator: Callable returning the default attributes

        Returns:
            The registered Blueprint

        Raises:
            InvalidFactoryNameError: If the name is not a simple identifier
        """
        validate_factory_name(name)

        replaced = name in self._blueprints
        blueprint = Blueprint(
            name=name,
            target_type=target_type,
            defaults_generator=defaults_generator,
        )
        self._blueprints[name] = blueprint

        logger.info(
            "Factory defined",
            extra={
                "factory_name": name,
                "target_type": blueprint.target_name,
                "replaced": replaced,
            },
        )
        return blueprint

    def get(self, name: str) -> Blueprint:
        try:
            return self._blueprints[name]
        except KeyError:
            logger.warning(
                "Factory lookup failed",
                extra={"factory_name": name},
            )
            raise UndefinedFactoryError(name) from None

    def attributes_for(
        self, name: str, overrides: Optional[Overrides] = None
    ) -> Attributes:
        """Compute the merged attributes build would construct from.

        The defaults generator runs, so its side effects (sequence
        increments, nested materializations) happen exactly as they would
        for ``build``.

        Raises:
            UndefinedFactoryError: If no factory is registered under name
        """
        return self._attributes(self.get(name), overrides)

    def build(self, name: str, overrides: Optional[Overrides] = None) -> Any:
        """Materialize an instance without persisting it.

        Args:
            name: Factory name
            overrides: Mapping, or generator returning one, whose keys win
                over the defaults

        Returns:
            A new ``target_type`` instance with no identifier assigned

        Raises:
            UndefinedFactoryError: If no factory is registered under name
        """
        blueprint = self.get(name)
        attributes = self._attributes(blueprint, overrides)
        instance = self._construct(blueprint, attributes)

        logger.debug(
            "Instance built",
            extra={"factory_name": name, "target_type": blueprint.target_name},
        )
        return instance

    def create(self, name: str, overrides: Optional[Overrides] = None) -> Any:
        """Materialize an instance and persist it.

        Args:
            name: Factory name
            overrides: Mapping, or generator returning one, whose keys win
                over the defaults

        Returns:
            A new ``target_type`` instance carrying its assigned ``id``

        Raises:
            UndefinedFactoryError: If no factory is registered under name
            PersistenceError: If the instance cannot be persisted or
                persisting did not assign an identifier
        """
        blueprint = self.get(name)
        attributes = self._attributes(blueprint, overrides)
        instance = self._construct(blueprint, attributes)

        ensure_persistable(instance, name).persist()
        identifier = ensure_identifier_assigned(instance, name)

        logger.debug(
            "Instance created",
            extra={
                "factory_name": name,
                "target_type": blueprint.target_name,
                "instance_id": identifier,
            },
        )
        return instance

    def build_list(
        self, name: str, count: int, overrides: Optional[Overrides] = None
    ) -> List[Any]:
        """Build ``count`` independent instances.

        Defaults and overrides are evaluated once per element.

        Raises:
            ValueError: If count is negative
            UndefinedFactoryError: If no factory is registered under name
        """
        return self._materialize_many(self.build, name, count, overrides)

    def create_list(
        self, name: str, count: int, overrides: Optional[Overrides] = None
    ) -> List[Any]:
        """Create ``count`` independent instances, each with its own id.

        Raises:
            ValueError: If count is negative
            UndefinedFactoryError: If no factory is registered under name
        """
        return self._materialize_many(self.create, name, count, overrides)

    def names(self) -> List[str]:
        return sorted(self._blueprints)

    def reset(self) -> None:
        """Forget every blueprint. The sequence registry is left alone."""
        logger.debug(
            "Resetting factory registry",
            extra={"factory_count": len(self._blueprints)},
        )
        self._blueprints.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._blueprints

    def __len__(self) -> int:
        return len(self._blueprints)

    def _materialize_many(
        self,
        materialize: Callable[[str, Optional[Overrides]], Any],
        name: str,
        count: int,
        overrides: Optional[Overrides],
    ) -> List[Any]:
        if count < 0:
            raise ValueError(f"Count must be non-negative, got {count}")

        # Fail on an unknown name even when count is 0
        self.get(name)

        instances = [materialize(name, overrides) for _ in range(count)]

        logger.debug(
            "Instance list materialized",
            extra={
                "factory_name": name,
                "count": count,
                "operation": materialize.__name__,
            },
        )
        return instances

    def _attributes(
        self, blueprint: Blueprint, overrides: Optional[Overrides]
    ) -> Attributes:
        attributes: Attributes = dict(
            blueprint.defaults_generator(self.sequences, self)
        )
        if overrides is not None:
            attributes.update(self._evaluate_overrides(overrides))
        return attributes

    def _evaluate_overrides(self, overrides: Overrides) -> Mapping[str, Any]:
        if callable(overrides):
            return overrides(self.sequences, self)
        return overrides

    @staticmethod
    def _construct(blueprint: Blueprint, attributes: Attributes) -> Any:
        return blueprint.target_type(**attributes)
