import pytest

from fabricate.fabricator import Fabricator
from fabricate.pytest_plugin import fabricator, model_repository  # noqa: F401
from fabricate.repos.memory import MemoryModelRepository

from .models import Post, User


def person_email(n: int) -> str:
    return f"person{n}@example.com"


@pytest.fixture
def blog(
    fabricator: Fabricator,  # noqa: F811
    model_repository: MemoryModelRepository,  # noqa: F811
) -> Fabricator:
    """Provide a Fabricator with the user/post blog factories defined.

    The post factory is defined before the user factory it depends on;
    blueprints are only looked up at materialization time.
    """
    fabricator.define_sequence("person_email", person_email)
    fabricator.define(
        "post",
        Post,
        lambda seq, fac: {"author": fac.create("user")},
    )
    fabricator.define(
        "user",
        User,
        lambda seq, fac: {
            "name": "Backbone User",
            "email": seq.next("person_email"),
        },
    )
    return fabricator
