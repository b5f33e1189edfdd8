"""
Pytest configuration for element system tests.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


# =============================================================================
# VALIDATION ON TEST RUN
# =============================================================================

def pytest_configure(config):
    """
    Validate built-in relation inverses before running tests.

    A broken inverse pairing surfaces as a collection failure rather
    than as scattered relation test failures.
    """
    from world.elements.validation import ElementError, validate_builtin_relations

    try:
        validate_builtin_relations()
    except ElementError as e:
        pytest.fail(f"Built-in relation validation failed:\n{e}", pytrace=False)


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def context():
    """Fresh context with FIRE and WATER registered, in that order."""
    from world.elements.context import ElementContext
    from world.elements.core import Element

    ctx = ElementContext()
    ctx.register_element(Element("FIRE"))
    ctx.register_element(Element("WATER"))
    return ctx


@pytest.fixture
def defaults_path():
    """Path to the shipped default world config."""
    return project_root / "config" / "element_defaults.yaml"


@pytest.fixture(autouse=True)
def _reset_active_config():
    """Keep set_config() calls from leaking between tests."""
    from world.elements.config import reset_config

    yield
    reset_config()
