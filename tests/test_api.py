from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from slidecraft.main import app
from slidecraft.services.layout.generator import LayoutGenerator
from slidecraft.services.layout.orchestrator import BatchOrchestrator
from slidecraft.services.outline_service import OutlineService
from slidecraft.services.presentation_service import ServiceResult
from slidecraft.services.service_instances import (
    get_orchestrator,
    get_outline_service,
    get_presentation_service,
)

from conftest import ScriptedProvider, layout_json

PROJECT = {
    "project_id": "p-1",
    "title": "Deck",
    "outlines": ["One", "Two"],
    "slides": None,
    "theme_name": None,
    "created_at": 1.0,
    "updated_at": 1.0,
}


class FakePresentationService:
    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []

    async def create_project(self, user_external_id: Optional[str], title: str, outlines) -> ServiceResult:
        self.calls.append({"user": user_external_id, "title": title, "outlines": list(outlines)})
        if not user_external_id:
            return ServiceResult(403, error="User not authenticated")
        return ServiceResult(200, data=PROJECT)

    async def get_project(self, project_id: str) -> ServiceResult:
        if project_id != "p-1":
            return ServiceResult(404, error="Project not found")
        return ServiceResult(200, data=PROJECT)

    async def generate_layouts(self, project_id: str, theme, user_external_id) -> ServiceResult:
        self.calls.append({"project": project_id, "theme": theme, "user": user_external_id})
        if user_external_id != "user_1":
            return ServiceResult(403, error="User not found in the database")
        return ServiceResult(200, data=[{"slideName": "One", "slideOrder": 1}])


async def _noop_sleep(delay: float) -> None:
    return None


@pytest.fixture
def client():
    presentation = FakePresentationService()
    app.dependency_overrides[get_presentation_service] = lambda: presentation
    app.dependency_overrides[get_outline_service] = lambda: OutlineService(
        ScriptedProvider(['{"outlines": ["Alpha point", "Beta point"]}'])
    )
    app.dependency_overrides[get_orchestrator] = lambda: BatchOrchestrator(
        LayoutGenerator(ScriptedProvider([layout_json("Alpha")])),
        sleep=_noop_sleep,
    )
    test_client = TestClient(app)
    test_client.presentation = presentation
    yield test_client
    app.dependency_overrides.clear()


def test_health(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_generate_outlines(client) -> None:
    response = client.post("/api/outlines", json={"topic": "Tea"})

    assert response.status_code == 200
    assert response.json() == {"outlines": ["Alpha point", "Beta point"]}


def test_stateless_layouts(client) -> None:
    response = client.post("/api/layouts", json={"outlines": ["Alpha"]})

    assert response.status_code == 200
    slides = response.json()["slides"]
    assert len(slides) == 1
    assert slides[0]["slideName"] == "Alpha"
    assert slides[0]["slideOrder"] == 1


def test_create_project_reads_user_header(client) -> None:
    response = client.post(
        "/api/projects",
        json={"title": "Deck", "outlines": ["One", "Two"]},
        headers={"X-User-Id": "user_1"},
    )

    assert response.status_code == 200
    assert response.json()["project_id"] == "p-1"
    assert client.presentation.calls[-1]["user"] == "user_1"


def test_create_project_without_user_is_forbidden(client) -> None:
    response = client.post("/api/projects", json={"title": "Deck", "outlines": ["One"]})

    assert response.status_code == 403
    assert response.json()["detail"] == "User not authenticated"


def test_get_project_not_found(client) -> None:
    assert client.get("/api/projects/p-1").status_code == 200
    response = client.get("/api/projects/nope")

    assert response.status_code == 404
    assert response.json()["detail"] == "Project not found"


def test_project_layouts_maps_service_status(client) -> None:
    ok = client.post("/api/projects/p-1/layouts", json={"theme": "midnight"}, headers={"X-User-Id": "user_1"})
    denied = client.post("/api/projects/p-1/layouts", json={"theme": "midnight"}, headers={"X-User-Id": "other"})

    assert ok.status_code == 200
    assert ok.json()["slides"][0]["slideName"] == "One"
    assert client.presentation.calls[-2]["theme"] == "midnight"
    assert denied.status_code == 403
    assert denied.json()["detail"] == "User not found in the database"
