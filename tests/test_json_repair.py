from __future__ import annotations

import json

from slidecraft.services.layout.json_repair import repair_json


def test_repair_strips_fence_trailing_comma_and_trailing_junk() -> None:
    raw = '```json\n{"a":1,}\n```\njunk after'

    assert json.loads(repair_json(raw)) == {"a": 1}


def test_repair_handles_plain_fence_without_language() -> None:
    raw = '```\n{"slideName": "x", "items": [1, 2,]}\n```'

    assert json.loads(repair_json(raw)) == {"slideName": "x", "items": [1, 2]}


def test_repair_collapses_whitespace() -> None:
    raw = '{\n\t"a":\r\n   "b"\n}'

    assert repair_json(raw) == '{ "a": "b" }'


def test_repair_drops_prose_after_last_brace() -> None:
    raw = 'Here you go: {"a": {"b": 2}} Hope this helps!'

    assert repair_json(raw).endswith("}}")


def test_repair_is_best_effort_for_garbage() -> None:
    assert repair_json("no json here") == "no json here"
    assert repair_json("") == ""
