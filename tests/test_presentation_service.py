from __future__ import annotations

import asyncio
from pathlib import Path

from slidecraft.database.database import create_engine_for, create_session_factory, init_db
from slidecraft.database.repositories import ProjectRepository, UserRepository
from slidecraft.services.layout.generator import LayoutGenerator
from slidecraft.services.layout.orchestrator import BatchOrchestrator
from slidecraft.services.presentation_service import PresentationService

from conftest import RecordingImageService, ScriptedProvider


async def _noop_sleep(delay: float) -> None:
    return None


def _run(tmp_path: Path, scenario):
    async def main():
        engine = create_engine_for(f"sqlite:///{tmp_path / 'slides.db'}")
        try:
            await init_db(engine)
            session_factory = create_session_factory(engine)
            orchestrator = BatchOrchestrator(
                LayoutGenerator(ScriptedProvider([], api_key=None)),
                image_service=RecordingImageService(),
                sleep=_noop_sleep,
            )
            service = PresentationService(orchestrator, session_factory)
            return await scenario(service, session_factory)
        finally:
            await engine.dispose()

    return asyncio.run(main())


async def _seed(session_factory, outlines=("Point one. Details", "Point two"), deleted=False) -> str:
    async with session_factory() as session:
        user = await UserRepository(session).get_or_create("user_1", email="u@example.com")
        project = await ProjectRepository(session).create({
            "user_id": user.id,
            "title": "Deck",
            "outlines": list(outlines),
            "is_deleted": deleted,
        })
        return project.project_id


def test_generate_layouts_stores_slides_and_theme(tmp_path: Path) -> None:
    async def scenario(service, session_factory):
        project_id = await _seed(session_factory)
        result = await service.generate_layouts(project_id, "midnight", "user_1")
        stored = await service.get_project(project_id)
        return result, stored

    result, stored = _run(tmp_path, scenario)

    assert result.status == 200
    assert [slide["slideOrder"] for slide in result.data] == [1, 2]
    assert result.data[0]["slideName"] == "Point one"
    assert stored.data["theme_name"] == "midnight"
    assert stored.data["slides"] == result.data


def test_generate_layouts_error_statuses(tmp_path: Path) -> None:
    async def scenario(service, session_factory):
        project_id = await _seed(session_factory)
        empty_id = await _seed(session_factory, outlines=())
        deleted_id = await _seed(session_factory, deleted=True)
        return [
            await service.generate_layouts("", "t", "user_1"),
            await service.generate_layouts(project_id, "t", None),
            await service.generate_layouts(project_id, "t", "stranger"),
            await service.generate_layouts("missing", "t", "user_1"),
            await service.generate_layouts(deleted_id, "t", "user_1"),
            await service.generate_layouts(empty_id, "t", "user_1"),
        ]

    results = _run(tmp_path, scenario)

    assert [(r.status, r.error) for r in results] == [
        (400, "Project ID is required"),
        (403, "User not authenticated"),
        (403, "User not found in the database"),
        (404, "Project not found"),
        (404, "Project not found"),
        (400, "Project does not have any outlines"),
    ]


def test_create_and_get_project(tmp_path: Path) -> None:
    async def scenario(service, session_factory):
        created = await service.create_project("user_2", "Climate", ["Causes", " ", "Effects"])
        fetched = await service.get_project(created.data["project_id"])
        anonymous = await service.create_project(None, "Climate", ["Causes"])
        return created, fetched, anonymous

    created, fetched, anonymous = _run(tmp_path, scenario)

    assert created.status == 200
    assert created.data["outlines"] == ["Causes", "Effects"]
    assert fetched.data["title"] == "Climate"
    assert fetched.data["slides"] is None
    assert anonymous.status == 403
