from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for sample trees and configuration dictionaries.
"""

import os
import sys
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from functorkit.domain.tree_models import Tree, branch, leaf  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_tree() -> Tree[int]:
    """
    Three-leaf tree used across the tree tests.

        Branch
        ├── Leaf(10)
        └── Branch
            ├── Leaf(20)
            └── Leaf(30)
    """
    return branch(leaf(10), branch(leaf(20), leaf(30)))


@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """Return a valid, complete configuration dictionary for testing."""
    return {
        "log_level": "INFO",
        "log_file": None,
        "law_samples": 5,
        "max_depth": 4,
        "seed": 1234,
        "output_format": "text",
    }
