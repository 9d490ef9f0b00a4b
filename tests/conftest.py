"""
conftest.py
-----------
Shared pytest configuration and fixtures for the Frogger tests.

Contains:
- Headless SDL setup so real pygame objects work without a window
- Common fixtures used across multiple test modules
- Pytest configuration and hooks
"""

import os
import sys
import random

# SDL must be told before pygame is first imported
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest
from unittest.mock import MagicMock

# Add project root to Python path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from frogger.core.runtime.game_session import GameSession


# ===========================================================
# Test Utilities
# ===========================================================

def create_mock_surface(width=101, height=171):
    """Create a mock pygame.Surface with common methods."""
    surface = MagicMock()
    surface.get_width.return_value = width
    surface.get_height.return_value = height
    surface.get_size.return_value = (width, height)
    return surface


# ===========================================================
# Common Fixtures
# ===========================================================

@pytest.fixture
def mock_draw_manager():
    """Mock DrawManager whose sprites are all one tile wide."""
    draw_manager = MagicMock()
    draw_manager.get_image.return_value = create_mock_surface()
    return draw_manager


@pytest.fixture
def scripted_rng():
    """random.Random stand-in; tests script randint/randrange/random."""
    return MagicMock(spec=random.Random)


@pytest.fixture
def session():
    """Fresh session that has not been started."""
    return GameSession()


@pytest.fixture
def running_session():
    """Session already in the RUNNING phase."""
    s = GameSession()
    s.start()
    return s


@pytest.fixture
def mock_event_manager():
    """Mock for EventManager."""
    event_manager = MagicMock()
    event_manager.subscribe = MagicMock()
    event_manager.dispatch = MagicMock()
    return event_manager


# ===========================================================
# Pytest Configuration
# ===========================================================

def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Mark every test outside an integration module as a unit test."""
    for item in items:
        if "integration" not in item.nodeid:
            item.add_marker(pytest.mark.unit)
