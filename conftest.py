"""Shared pytest fixtures."""

import dataclasses

import pytest

from ringpoly.config import get_config, set_config


@pytest.fixture(autouse=True)
def restore_engine_config():
    """Reinstall the engine configuration that was active before each test."""
    snapshot = dataclasses.replace(get_config())
    yield
    set_config(snapshot)
