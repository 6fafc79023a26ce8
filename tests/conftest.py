"""
Pytest configuration and fixtures
"""
from pathlib import Path
from types import SimpleNamespace
from typing import ClassVar, FrozenSet, Optional

import pytest
from pydantic import BaseModel, Field

from webtoolbox.core.config import Config
from webtoolbox.models import (
    Errors,
    validates_email_format_of,
    validates_inclusion_of,
    validates_url_format_of,
    validates_username_format_of,
)

pytest_plugins = ["webtoolbox.testing.plugin"]

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class User(BaseModel):
    protected_attributes: ClassVar[FrozenSet[str]] = frozenset({"admin"})

    login: str = Field(min_length=3, max_length=16)
    email: str
    age: Optional[int] = None
    rating: int = 3
    homepage: Optional[str] = None
    admin: bool = False

    check_email = validates_email_format_of("email")
    check_login = validates_username_format_of("login")
    check_homepage = validates_url_format_of("homepage")
    check_rating = validates_inclusion_of("rating", in_=range(1, 6))


@pytest.fixture(autouse=True)
def toolbox_settings(monkeypatch):
    """Pin locale and static pages regardless of the developer's .env"""
    monkeypatch.setattr(Config, "LOCALE", "nl")
    monkeypatch.setenv("PUBLIC_DIR", str(PROJECT_ROOT / "public"))


@pytest.fixture
def user_model():
    return User


def bound(**values):
    """A bare bound object: attribute values plus an ``errors`` collection."""
    return SimpleNamespace(errors=Errors(), **values)


@pytest.fixture
def post():
    return bound(title=None, body=None, admin=None)
