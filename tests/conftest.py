"""Shared fixtures for nanogit tests."""

import pytest

from nanogit import Author, Repository


@pytest.fixture
def author():
    """A valid author shared across commits."""
    return Author("Jane", "jane@example.com")


@pytest.fixture
def repo():
    """A fresh repository with only an empty main branch."""
    return Repository()
