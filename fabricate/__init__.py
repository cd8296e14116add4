"""
fabricate: named factories and sequences for test data.

Define sequences and factories once on a ``Fabricator``, then build
in-memory instances or create persisted ones, singly or in lists, with
per-call overrides::

    fab = Fabricator()
    fab.define_sequence("email", lambda n: f"person{n}@example.com")
    fab.define(
        "user",
        User,
        lambda seq, fac: {"name": "Test User", "email": seq.next("email")},
    )
    user = fab.create("user", {"name": "Someone Else"})
"""

from .domain import Attributes, Blueprint, Sequence
from .fabricator import Fabricator
from .factories import FactoryRegistry
from .models import (
    PersistableModel,
    get_default_repository,
    set_default_repository,
)
from .sequences import SequenceRegistry
from .validation import (
    FabricateError,
    InvalidFactoryNameError,
    PersistenceError,
    UndefinedFactoryError,
    UndefinedSequenceError,
)

__all__ = [
    "Attributes",
    "Blueprint",
    "Fabricator",
    "FabricateError",
    "FactoryRegistry",
    "InvalidFactoryNameError",
    "PersistableModel",
    "PersistenceError",
    "Sequence",
    "SequenceRegistry",
    "UndefinedFactoryError",
    "UndefinedSequenceError",
    "get_default_repository",
    "set_default_repository",
]
