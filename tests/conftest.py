from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Union

import pytest

from slidecraft.ai.base import AIMessage, AIProvider, AIResponse


class ScriptedProvider(AIProvider):
    """Returns queued completions in order; exceptions in the queue are raised."""

    def __init__(self, script: Optional[List[Union[str, Exception]]] = None, api_key: Optional[str] = "test-key"):
        super().__init__({"api_key": api_key, "model": "scripted"})
        self.script = list(script or [])
        self.prompts: List[str] = []

    async def chat_completion(self, messages: List[AIMessage], **kwargs) -> AIResponse:
        self.prompts.append(messages[-1].content)
        if not self.script:
            raise AssertionError("ScriptedProvider called more times than scripted")
        item = self.script.pop(0)
        if isinstance(item, Exception):
            raise item
        return AIResponse(content=item, model="scripted", usage={})


class RecordingImageService:
    def __init__(self) -> None:
        self.batches: List[list] = []

    async def resolve_batch(self, layouts) -> None:
        self.batches.append(list(layouts))


def layout_payload(name: str = "Intro", layout_type: str = "imageAndText") -> Dict[str, Any]:
    return {
        "id": "model-id",
        "slideName": name,
        "type": layout_type,
        "className": "p-10",
        "content": {
            "id": "dup",
            "type": "column",
            "name": "Column",
            "content": [
                {"id": "dup", "type": "heading1", "name": "Heading1", "content": name},
                {
                    "id": "dup",
                    "type": "resizable-column",
                    "name": "ResizableColumn",
                    "content": [
                        {"id": "dup", "type": "image", "name": "Image", "content": "", "alt": "city skyline at night"},
                        {"id": "dup", "type": "bulletList", "name": "BulletList", "content": ["a", "b"]},
                    ],
                },
            ],
        },
    }


def layout_json(name: str = "Intro", layout_type: str = "imageAndText") -> str:
    return json.dumps(layout_payload(name, layout_type))


@pytest.fixture
def scripted_provider():
    return ScriptedProvider
