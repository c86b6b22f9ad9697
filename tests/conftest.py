"""Shared fixtures for field risk tests."""

import pytest

from tests.helpers import make_observation


@pytest.fixture
def calm_observation():
    return make_observation()
