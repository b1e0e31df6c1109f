"""Utility functions for the listing service"""

import re
from typing import Any

_OBJECT_ID_RE = re.compile(r'[0-9a-fA-F]{24}')


def is_valid_object_id(value: Any) -> bool:
    """
    Check that a value has the shape of a document identifier
    (24 hexadecimal characters).

    Examples:
        >>> is_valid_object_id("65f1c0a2b3d4e5f601234567")
        True

        >>> is_valid_object_id("not-an-id")
        False
    """
    if not isinstance(value, str):
        return False
    return bool(_OBJECT_ID_RE.fullmatch(value))
