"""
Noteful API — Folder Endpoint Tests
====================================

What:  GET /folders, POST /folders, GET /folders/{id} through the full app.
How:   HTTPX AsyncClient over ASGITransport against an in-memory SQLite
       database (see conftest.py).
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from noteful_api.config import Settings
from noteful_api.exceptions import DatabaseError
from noteful_api.main import create_app
from noteful_api.services.folder_service import FolderService, get_folder_service


class TestListFolders:

    @pytest.mark.asyncio
    async def test_empty_store_returns_empty_array(self, test_client):
        response = await test_client.get("/folders")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_returns_all_folders(self, test_client, seeded):
        response = await test_client.get("/folders")

        assert response.status_code == 200
        assert response.json() == seeded["folders"]


class TestGetFolder:

    @pytest.mark.asyncio
    async def test_missing_folder_is_404(self, test_client):
        response = await test_client.get("/folders/123123")

        assert response.status_code == 404
        assert response.json() == {"error": {"message": "Folder does not exist"}}

    @pytest.mark.asyncio
    async def test_returns_folder_by_id(self, test_client, seeded):
        response = await test_client.get("/folders/50")

        assert response.status_code == 200
        assert response.json() == seeded["folders"][0]

    @pytest.mark.asyncio
    async def test_non_integer_id_is_400(self, test_client):
        response = await test_client.get("/folders/not-a-number")

        assert response.status_code == 400
        assert response.json()["error"]["message"].startswith("Invalid 'folder_id'")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("folder_id", [0, -5, 2**31, 3000000000])
    async def test_id_outside_storage_range_is_404_without_query(
        self, app, test_client, folder_id
    ):
        class QueryingFolderService(FolderService):
            async def get_by_id(self, folder_id):
                raise DatabaseError(context={"error_type": "DataError"})

        app.dependency_overrides[get_folder_service] = lambda: QueryingFolderService(None)

        response = await test_client.get(f"/folders/{folder_id}")

        assert response.status_code == 404
        assert response.json() == {"error": {"message": "Folder does not exist"}}


class TestCreateFolder:

    @pytest.mark.asyncio
    async def test_creates_folder_with_201(self, test_client, seeded):
        new_folder = {"folder_title": "Test folder post"}

        response = await test_client.post("/folders", json=new_folder)

        assert response.status_code == 201
        body = response.json()
        assert body["folder_title"] == new_folder["folder_title"]
        assert "id" in body
        assert response.headers["location"] == f"/folders/{body['id']}"

        fetched = await test_client.get(f"/folders/{body['id']}")
        assert fetched.status_code == 200
        assert fetched.json() == body

    @pytest.mark.asyncio
    async def test_new_id_is_unused(self, test_client, seeded):
        existing = {f["id"] for f in seeded["folders"]}

        response = await test_client.post("/folders", json={"folder_title": "Another"})

        assert isinstance(response.json()["id"], int)
        assert response.json()["id"] not in existing

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{}, {"folder_title": None}, {"title": "wrong key"}])
    async def test_missing_folder_title_is_400(self, test_client, body):
        response = await test_client.post("/folders", json=body)

        assert response.status_code == 400
        assert response.json() == {
            "error": {"message": "Missing 'folder_title' in request body"}
        }

        listing = await test_client.get("/folders")
        assert listing.json() == []

    @pytest.mark.asyncio
    async def test_no_body_is_400(self, test_client):
        response = await test_client.post("/folders")

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Missing 'folder_title' in request body"

    @pytest.mark.asyncio
    async def test_malformed_json_is_400(self, test_client):
        response = await test_client.post(
            "/folders",
            content=b'{"folder_title": ',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": {"message": "Malformed JSON in request body"}}

    @pytest.mark.asyncio
    async def test_markup_in_title_is_escaped(self, test_client):
        response = await test_client.post(
            "/folders", json={"folder_title": '<script>alert("xss");</script>'}
        )

        assert response.status_code == 201
        title = response.json()["folder_title"]
        assert "<script>" not in title
        assert title == '&lt;script&gt;alert("xss");&lt;/script&gt;'


class TestFolderStorageErrors:

    @pytest.mark.asyncio
    async def test_storage_failure_is_opaque_500(self, app, test_client):
        class FailingFolderService(FolderService):
            async def list_all(self):
                raise DatabaseError(context={"error_type": "OperationalError"})

        app.dependency_overrides[get_folder_service] = lambda: FailingFolderService(None)

        response = await test_client.get("/folders")

        assert response.status_code == 500
        assert response.json() == {"error": {"message": "server error"}}

    @pytest.mark.asyncio
    async def test_failed_commit_is_500_and_nothing_saved(self, test_client, monkeypatch):
        async def failing_commit(session):
            raise OperationalError("COMMIT", {}, Exception("database is locked"))

        monkeypatch.setattr(AsyncSession, "commit", failing_commit)

        response = await test_client.post("/folders", json={"folder_title": "Unsaved"})

        assert response.status_code == 500
        assert response.json() == {"error": {"message": "server error"}}
        assert "location" not in response.headers

        monkeypatch.undo()
        listing = await test_client.get("/folders")
        assert listing.json() == []


class TestApiPrefix:

    @pytest.mark.asyncio
    async def test_location_includes_prefix(self, db_engine):
        app = create_app(settings=Settings(api_prefix="/api/"), engine=db_engine)
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.post("/api/folders", json={"folder_title": "Prefixed"})

        assert response.status_code == 201
        assert response.headers["location"] == f"/api/folders/{response.json()['id']}"
