"""
Best-effort cleanup of model output before JSON parsing
"""

import re

_FENCE_OPEN = re.compile(r'^```(?:json)?\s*', re.IGNORECASE)
_FENCE_CLOSE = re.compile(r'\s*```$')
_TRAILING_COMMA_OBJECT = re.compile(r',\s*}')
_TRAILING_COMMA_ARRAY = re.compile(r',\s*]')
_WHITESPACE_RUN = re.compile(r'\s+')


def repair_json(raw_text: str) -> str:
    """
    Normalize raw model text into a candidate JSON string.

    Steps run in a fixed order, each assuming the previous one ran:
    strip a markdown fence, cut everything after the last ``}``, drop
    trailing commas, then collapse all whitespace to single spaces.
    The result is not guaranteed to parse.
    """
    cleaned = (raw_text or "").strip()

    if cleaned.startswith("```"):
        cleaned = _FENCE_OPEN.sub("", cleaned, count=1)
        cleaned = _FENCE_CLOSE.sub("", cleaned, count=1)

    last_brace = cleaned.rfind("}")
    if last_brace != -1:
        cleaned = cleaned[:last_brace + 1]

    cleaned = _TRAILING_COMMA_OBJECT.sub("}", cleaned)
    cleaned = _TRAILING_COMMA_ARRAY.sub("]", cleaned)

    cleaned = cleaned.replace("\n", " ").replace("\r", " ").replace("\t", " ")
    cleaned = _WHITESPACE_RUN.sub(" ", cleaned)

    return cleaned.strip()
