"""
Shared test fixtures and configuration.

Pagination environment variables are cleared BEFORE any package imports so the
settings singleton always starts from the built-in defaults.
"""

import os
import sys

# Ensure the package is importable without installation
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

os.environ.pop("PAGINATION_DEFAULT_PAGE", None)
os.environ.pop("PAGINATION_DEFAULT_LIMIT", None)

import pytest  # noqa: E402


@pytest.fixture
def match_stage():
    """A single $match stage used as the caller pipeline."""
    return {"$match": {"test": "test"}}


@pytest.fixture
def make_docs():
    """Build `n` identical documents."""

    def _make(n, doc=None):
        return [dict(doc or {"test": "test"}) for _ in range(n)]

    return _make
