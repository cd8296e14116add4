"""
Domain models defined as Pydantic models.
These are the records held by the sequence and factory registries.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
)
from typing import Any, Callable, Dict, Mapping, Type


# Attribute name -> value, as produced by defaults and override generators
Attributes = Dict[str, Any]


def identity(n: int) -> int:
    return n


def empty_attributes(*registries: Any) -> Attributes:
    """Defaults generator used when a factory is defined without one."""
    return {}


class Sequence(BaseModel):
    """A named counter paired with a generator producing one value per
    increment.

    The counter starts at 0, so the first value handed out is
    ``generator(1)``.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    counter: int = Field(default=0, ge=0)
    generator: Callable[[int], Any] = identity

    def advance(self) -> Any:
        """Increment the counter and return the value generated for it."""
        self.counter += 1
        return self.generator(self.counter)


class Blueprint(BaseModel):
    """A named association of a target type and its defaults generator.

    The defaults generator is called with the sequence registry and the
    factory registry, in that order, and returns the default attributes
    for one instance. It may draw sequence values or materialize nested
    instances through those registries.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    target_type: Type[Any]
    defaults_generator: Callable[..., Mapping[str, Any]] = empty_attributes

    @property
    def target_name(self) -> str:
        return self.target_type.__name__
