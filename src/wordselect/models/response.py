"""Response-side models.

A response is the mapping the host collects from the form for one attempt:
``{"p2": "on", "p7": "true"}``. Keys are place field names, values are the
raw submitted strings. Only this module knows which strings mean "selected".
"""
from __future__ import annotations

import re
from enum import Enum
from typing import Mapping, Optional, Sequence

Response = Mapping[str, str]
AttemptSequence = Sequence[Response]

FIELD_PREFIX = "p"
SELECTED_VALUES = frozenset({"on", "true"})
# Only this value counts when tallying wrong selections
WRONG_SELECTION_VALUE = "on"

# Exactly the keys field_name produces: ASCII digits, no leading zero, nothing trailing
_FIELD_PATTERN = re.compile(r"p(0|[1-9][0-9]*)")


class SelectionState(str, Enum):
    """Selection state of one place in one response."""
    SELECTED = "selected"
    UNSELECTED = "unselected"
    ABSENT = "absent"


def field_name(place: int) -> str:
    """Response key for a place, i.e. ``p0``, ``p1`` ..."""
    return f"{FIELD_PREFIX}{place}"


def place_from_field(key: str) -> Optional[int]:
    """Place index encoded in a response key, or None for foreign keys."""
    match = _FIELD_PATTERN.fullmatch(key)
    if match is None:
        return None
    return int(match.group(1))


def selection_state(place: int, response: Response) -> SelectionState:
    """Normalize the submitted value for a place."""
    key = field_name(place)
    if key not in response:
        return SelectionState.ABSENT
    if response[key] in SELECTED_VALUES:
        return SelectionState.SELECTED
    return SelectionState.UNSELECTED
