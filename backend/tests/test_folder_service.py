"""
Noteful API — Folder Service Unit Tests
========================================

What:  Tests for FolderService list / get / insert against a mocked session.
How:   Mock DB session from conftest; no real database.
"""

import pytest
from unittest.mock import MagicMock
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from noteful_api.exceptions import DatabaseError
from noteful_api.models.folder import Folder
from noteful_api.schemas.folder import FolderCreate
from noteful_api.services.folder_service import FolderService


class TestFolderServiceList:

    @pytest.mark.asyncio
    async def test_list_all_empty(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = []
        mock_db_session.execute.return_value = mock_result

        result = await FolderService(mock_db_session).list_all()

        assert result == []

    @pytest.mark.asyncio
    async def test_list_all_returns_rows(self, mock_db_session):
        rows = [Folder(id=1, folder_title="One"), Folder(id=2, folder_title="Two")]
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = rows
        mock_db_session.execute.return_value = mock_result

        result = await FolderService(mock_db_session).list_all()

        assert [f.id for f in result] == [1, 2]

    @pytest.mark.asyncio
    async def test_each_call_runs_a_fresh_query(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = []
        mock_db_session.execute.return_value = mock_result
        service = FolderService(mock_db_session)

        await service.list_all()
        await service.list_all()

        assert mock_db_session.execute.await_count == 2


class TestFolderServiceGet:

    @pytest.mark.asyncio
    async def test_get_by_id_found(self, mock_db_session):
        folder = Folder(id=50, folder_title="Important")
        mock_result = MagicMock()
        mock_result.scalar_one_or_none.return_value = folder
        mock_db_session.execute.return_value = mock_result

        result = await FolderService(mock_db_session).get_by_id(50)

        assert result is folder

    @pytest.mark.asyncio
    async def test_get_by_id_missing_returns_none(self, mock_db_session):
        """Absence is signalled with None, not an exception."""
        mock_result = MagicMock()
        mock_result.scalar_one_or_none.return_value = None
        mock_db_session.execute.return_value = mock_result

        result = await FolderService(mock_db_session).get_by_id(123123)

        assert result is None

    @pytest.mark.asyncio
    async def test_storage_error_is_wrapped(self, mock_db_session):
        original = SQLAlchemyError("connection reset")
        mock_db_session.execute.side_effect = original

        with pytest.raises(DatabaseError) as exc_info:
            await FolderService(mock_db_session).get_by_id(1)

        assert exc_info.value.__cause__ is original
        assert exc_info.value.context["folder_id"] == 1


class TestFolderServiceInsert:

    @pytest.mark.asyncio
    async def test_insert_returns_row_with_assigned_id(self, mock_db_session):
        async def assign_id(obj):
            obj.id = 53
        mock_db_session.refresh.side_effect = assign_id

        folder = await FolderService(mock_db_session).insert(
            FolderCreate(folder_title="Test folder post")
        )

        assert folder.id == 53
        assert folder.folder_title == "Test folder post"
        mock_db_session.add.assert_called_once_with(folder)
        mock_db_session.flush.assert_awaited_once()
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_insert_failure_propagates_as_database_error(self, mock_db_session):
        mock_db_session.flush.side_effect = SQLAlchemyError("constraint violated")

        with pytest.raises(DatabaseError):
            await FolderService(mock_db_session).insert(FolderCreate(folder_title="x"))

        mock_db_session.refresh.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failed_commit_propagates_as_database_error(self, mock_db_session):
        mock_db_session.commit.side_effect = OperationalError(
            "COMMIT", {}, Exception("database is locked")
        )

        with pytest.raises(DatabaseError) as exc_info:
            await FolderService(mock_db_session).insert(FolderCreate(folder_title="x"))

        assert exc_info.value.context["error_type"] == "OperationalError"
