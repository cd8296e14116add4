"""
Tests for the Fabricator facade.

Design decisions documented:
- A Fabricator's factory registry always draws on its own sequence
  registry
- reset() forgets factories and sequences together
- Separate Fabricators share nothing but the default model repository
- Definitions are logged at INFO with structured context
"""

import logging

import pytest

from fabricate.fabricator import Fabricator
from fabricate.factories import FactoryRegistry
from fabricate.sequences import SequenceRegistry
from fabricate.validation import UndefinedFactoryError, UndefinedSequenceError

from .models import User


def user_defaults(seq, fac):
    return {"name": "Test User", "email": seq.next("email")}


def test_wires_factories_to_sequences() -> None:
    fab = Fabricator()

    assert fab.factories.sequences is fab.sequences


def test_accepts_injected_registries() -> None:
    sequences = SequenceRegistry()
    factories = FactoryRegistry(sequences)

    fab = Fabricator(sequences, factories)

    assert fab.sequences is sequences
    assert fab.factories is factories


def test_takes_sequences_from_injected_factories() -> None:
    factories = FactoryRegistry()

    fab = Fabricator(factories=factories)

    assert fab.sequences is factories.sequences


def test_rejects_mismatched_registries() -> None:
    with pytest.raises(ValueError, match="sequence registry"):
        Fabricator(SequenceRegistry(), FactoryRegistry(SequenceRegistry()))


def test_generators_receive_the_fabricators_registries(
    fabricator: Fabricator,
) -> None:
    received = []

    def defaults(seq, fac):
        received.append((seq, fac))
        return {"name": "A", "email": "a@example.com"}

    fabricator.define("user", User, defaults)
    fabricator.build("user")

    assert received == [(fabricator.sequences, fabricator.factories)]


def test_reset_forgets_everything(fabricator: Fabricator) -> None:
    fabricator.define_sequence("email", lambda n: f"p{n}@example.com")
    fabricator.define("user", User, user_defaults)

    fabricator.reset()

    with pytest.raises(UndefinedFactoryError):
        fabricator.build("user")
    with pytest.raises(UndefinedSequenceError):
        fabricator.next("email")


def test_fabricators_are_isolated(model_repository) -> None:
    first = Fabricator()
    second = Fabricator()
    for fab in (first, second):
        fab.define_sequence("email", lambda n: f"p{n}@example.com")
        fab.define("user", User, user_defaults)

    first.build_list("user", 3)

    assert second.build("user").email == "p1@example.com"
    assert "user" not in Fabricator().factories


def test_redefinition_leaves_materialized_instances_alone(
    fabricator: Fabricator, model_repository
) -> None:
    fabricator.define_sequence("email", lambda n: f"p{n}@example.com")
    fabricator.define("user", User, user_defaults)
    created = fabricator.create("user")

    fabricator.define(
        "user", User, lambda seq, fac: {"name": "New", "email": "n@x"}
    )
    fabricator.define_sequence("email", lambda n: f"other{n}@example.com")

    assert created.name == "Test User"
    assert created.email == "p1@example.com"
    assert created.id == 1
    assert fabricator.create("user").name == "New"


def test_define_is_logged(
    fabricator: Fabricator, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO, logger="fabricate")

    fabricator.define("user", User)
    fabricator.define("user", User)

    records = [
        r for r in caplog.records if r.getMessage() == "Factory defined"
    ]
    assert [r.replaced for r in records] == [False, True]
    assert records[0].factory_name == "user"
    assert records[0].target_type == "User"


def test_lookup_failure_is_logged(
    fabricator: Fabricator, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.WARNING, logger="fabricate")

    with pytest.raises(UndefinedFactoryError):
        fabricator.build("ghost")

    assert any(
        r.getMessage() == "Factory lookup failed" and r.factory_name == "ghost"
        for r in caplog.records
    )
