"""Test helper utilities for managing global state in tests.

This module provides utilities for resetting global service instances to
ensure test isolation and prevent state leakage between tests.
"""

import sys
from pathlib import Path

# Add parent directory to sys.path to enable imports from models, services and utils
parent_dir = Path(__file__).parent.parent
if str(parent_dir) not in sys.path:
    sys.path.insert(0, str(parent_dir))

# ruff: noqa: E402
from services.match_details_service import reset_match_details_service


def reset_all_services() -> None:
    """Reset all global service instances."""
    reset_match_details_service()


def reset_all_globals() -> None:
    """Reset all global service instances.

    This is the recommended function to call in test teardown or setup
    to ensure complete isolation between tests.
    """
    reset_all_services()
