"""
Shallow structural check for generated slide layouts
"""

import json


def is_valid_layout(json_string: str) -> bool:
    """True when the string parses to an object with a string ``slideName``,
    a string ``type`` and an object ``content``."""
    try:
        parsed = json.loads(json_string)
    except (TypeError, ValueError):
        return False

    return (
        isinstance(parsed, dict)
        and isinstance(parsed.get("slideName"), str)
        and isinstance(parsed.get("type"), str)
        and isinstance(parsed.get("content"), dict)
    )
