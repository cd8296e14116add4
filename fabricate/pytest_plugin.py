"""
pytest fixtures for isolated factory definitions and identifiers.

Installed as a pytest plugin through the ``pytest11`` entry point, so any
project with fabricate installed can request these fixtures directly.
"""

from typing import Generator

import pytest

from fabricate.fabricator import Fabricator
from fabricate.models import set_default_repository
from fabricate.repos.memory import MemoryModelRepository


@pytest.fixture
def fabricator() -> Generator[Fabricator, None, None]:
    """Provide a Fabricator with empty registries."""
    fab = Fabricator()
    yield fab
    fab.reset()


@pytest.fixture
def model_repository() -> Generator[MemoryModelRepository, None, None]:
    """Install a fresh memory repository as the default for this test.

    Identifiers start over at 1, and the previous default repository is
    restored afterwards.
    """
    repository = MemoryModelRepository(start=1)
    previous = set_default_repository(repository)
    yield repository
    set_default_repository(previous)
