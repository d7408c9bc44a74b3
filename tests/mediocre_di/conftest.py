"""Shared test fixtures for container tests."""

from __future__ import annotations

import itertools
from typing import Any

import pytest

from mediocre_di import Container

_ids = itertools.count(1)


class Thumb:
    """Leaf service with no dependencies."""

    def __init__(self) -> None:
        self.id = next(_ids)


class Twiddler:
    """Second leaf service with no dependencies."""

    def __init__(self) -> None:
        self.id = next(_ids)


class Target:
    """Service built from a keyed mapping holding a target appendage."""

    def __init__(self, deps: dict[str, Any]) -> None:
        self.id = next(_ids)
        self.target_appendage = deps["target_appendage"]


class ActionTaker:
    """Service at the top of a two-level dependency graph."""

    def __init__(self, deps: dict[str, Any]) -> None:
        self.id = next(_ids)
        self.action = deps["action"]
        self.target = deps["target"]


@pytest.fixture
def container():
    """Create a fresh container with default configuration."""
    return Container()
