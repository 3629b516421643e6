"""Shared fixtures for xtlib tests."""

from __future__ import annotations

import os
import sys

import pytest

from xtlib import Set
from xtlib._term import force_color


@pytest.fixture
def hello_world():
    s = Set()
    s.add("hello")
    s.add("world")
    return s


@pytest.fixture(autouse=True)
def _reset_color():
    """Each test starts with colour detection rather than a pinned setting."""
    force_color(None)
    yield
    force_color(None)


@pytest.fixture(autouse=True)
def _add_examples_to_path():
    """Ensure examples/ is importable."""
    examples_dir = os.path.join(os.path.dirname(__file__), "..", "examples")
    examples_dir = os.path.abspath(examples_dir)
    if examples_dir not in sys.path:
        sys.path.insert(0, examples_dir)
    yield
    if examples_dir in sys.path:
        sys.path.remove(examples_dir)
