"""Shared fixtures for the breeze test suite."""

import pytest

from breeze.resolver import Resolver
from breeze.tables import TableRegistry


@pytest.fixture(scope="session")
def registry():
    return TableRegistry.load()


@pytest.fixture
def resolver(registry):
    return Resolver(registry)
