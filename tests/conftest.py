"""Test configuration for module import paths."""

from __future__ import annotations

import random
import sys
from pathlib import Path

import pytest


def _ensure_src_on_path() -> None:
    root_path = Path(__file__).resolve().parents[1]
    for path in (root_path / "src", root_path):
        value = str(path)
        if value not in sys.path:
            sys.path.insert(0, value)


_ensure_src_on_path()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1337)
