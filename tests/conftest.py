"""Root-level pytest fixtures for all tests.

This module provides fixtures that are available to all tests in the project.
"""

import sys
from unittest import mock

# Mock wx before any imports that might need it (for Linux/headless environments)
if "wx" not in sys.modules:
    wx_mock = mock.MagicMock()
    wx_mock.VSCROLL = 32
    wx_mock.ALL = 1024
    wx_mock.EXPAND = 2048
    wx_mock.ALIGN_CENTER_VERTICAL = 4096
    wx_mock.RIGHT = 8192
    wx_mock.LEFT = 16384
    wx_mock.TOP = 32768
    wx_mock.BOTTOM = 65536
    wx_mock.OK = 131072
    wx_mock.ICON_ERROR = 1048576
    wx_mock.Colour = mock.Mock(return_value=mock.MagicMock())
    sys.modules["wx"] = wx_mock

import pytest
from test_helpers import reset_all_globals


@pytest.fixture(autouse=True)
def reset_global_state():
    """Automatically reset all global service instances after each test.

    This fixture ensures test isolation by resetting all singleton instances
    to None after each test completes, preventing state leakage between tests.
    """
    yield
    reset_all_globals()
