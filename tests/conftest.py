"""Test configuration for package."""
import pytest

from needle.registry import get_registry_state, restore_registry_state


@pytest.fixture
def preserve_registry():
    """Snapshot the global needle registry and restore it after the test."""
    state = get_registry_state()
    yield
    restore_registry_state(state)
