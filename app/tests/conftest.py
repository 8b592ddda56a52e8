"""Shared pytest fixtures."""

import pytest

from serde_gettext.i18n import NullCatalog, Resolver


@pytest.fixture
def null_catalog():
    """Identity catalog returning source strings unchanged."""
    return NullCatalog()


@pytest.fixture
def resolver(null_catalog):
    """Resolver over the identity catalog, without date/time support."""
    return Resolver(null_catalog)
