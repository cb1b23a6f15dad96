"""Attribute predicates for the suppliers-and-parts example schema."""

import re
from typing import Any, Dict, List

from .fixnum import is_fixnum, serialize_fixnum

COLORS = frozenset({"Red", "Green", "Blue", "Yellow", "Black", "White"})

_PART_NUMBER = re.compile(r"[Pp]\d+")


def is_pno(value: Any) -> bool:
    if not isinstance(value, str) or not _PART_NUMBER.fullmatch(value):
        raise TypeError(f"{value!r} is not a valid part number")
    return True


def is_color(value: Any) -> bool:
    if not isinstance(value, str):
        raise TypeError(f"{value!r} is not a color name")
    return value in COLORS


def parts_attributes() -> List[Dict[str, Any]]:
    """Attribute definitions of the parts relvar."""
    return [
        {'name': 'PNO', 'type': is_pno, 'description': 'Part number'},
        {'name': 'PNAME', 'type': str},
        {'name': 'COLOR', 'type': is_color, 'default': 'Green'},
        {'name': 'WEIGHT', 'type': is_fixnum(1), 'serialize': serialize_fixnum(1)},
        {'name': 'CITY', 'type': str},
    ]
