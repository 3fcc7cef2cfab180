"""
Pytest configuration for unit tests.

Clears SUBGRAPH_ environment overrides so config defaults are predictable.
"""

import os


def pytest_configure(config):
    """Drop SUBGRAPH_* settings inherited from the shell."""
    for key in list(os.environ):
        if key.startswith("SUBGRAPH_"):
            del os.environ[key]
