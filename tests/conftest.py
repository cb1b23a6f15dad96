"""Pytest configuration and fixtures."""

from typing import Any, Dict, List

import pytest

from relvar import Heading, Relvar
from relvar.types import parts_attributes


@pytest.fixture
def part_definitions() -> List[Dict[str, Any]]:
    """Attribute definitions of the parts relvar."""
    return parts_attributes()


@pytest.fixture
def parts_heading(part_definitions) -> Heading:
    return Heading.from_definitions(part_definitions)


@pytest.fixture
def parts(part_definitions) -> Relvar:
    """Create an empty parts relvar."""
    return Relvar(part_definitions, name="P")


@pytest.fixture
def nut() -> Dict[str, Any]:
    """A valid candidate tuple, keyed in mixed case."""
    return {
        "PNO": "P1",
        "color": "Red",
        "PName": "Nut",
        "WEIGHT": 12.0,
        "city": "London",
    }


@pytest.fixture
def bolt() -> Dict[str, Any]:
    """A valid candidate tuple relying on the COLOR default."""
    return {"PNO": "P2", "PNAME": "Bolt", "WEIGHT": "17.0", "CITY": "Paris"}
