"""Document identifier helpers."""

import os
import re
import time

_OBJECT_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")


def is_object_id(value: object) -> bool:
    """Return True when the value has the 24-hex document id shape."""
    return isinstance(value, str) and bool(_OBJECT_ID_PATTERN.match(value))


def new_object_id() -> str:
    """Return a new id: 4 bytes of epoch seconds then 8 random bytes."""
    return f"{int(time.time()):08x}{os.urandom(8).hex()}"
