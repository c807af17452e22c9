"""Shared fixtures: small form models used by the model-bound tests."""

import pytest
from pydantic import Field

from markupkit.context import set_url_resolver
from markupkit.model import FormModel


class Post(FormModel):
    title: str = Field(default="", title="Post title", max_length=64, description="Keep it short.")
    body: str = ""
    published: bool = False
    tags: list = Field(default_factory=list)
    category: str | None = None


class Anonymous(FormModel):
    __form_name__ = ""

    email: str = ""
    dates: list = Field(default_factory=list)


class Author:
    """A record that is submitted as its primary key."""

    def __init__(self, key):
        self.key = key

    def get_primary_key(self):
        return self.key


@pytest.fixture
def post():
    return Post(title="Hello <World>", body="a & b", tags=["x", "y"])


@pytest.fixture
def anonymous():
    return Anonymous(email="me@example.com", dates=["2024-01-01", "2024-02-01"])


@pytest.fixture(autouse=True)
def reset_url_resolver():
    yield
    set_url_resolver(None)
