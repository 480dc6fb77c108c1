"""
Unit Tests for Database Session Management.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from notafacil.backend.core import database


@pytest.fixture
def mock_session():
    session = AsyncMock()
    factory = MagicMock()
    factory.return_value.__aenter__ = AsyncMock(return_value=session)
    factory.return_value.__aexit__ = AsyncMock(return_value=False)
    with patch("notafacil.backend.core.database.get_session_factory", return_value=factory):
        yield session


class TestGetDbSession:
    """Tests for the request-scoped session dependency."""

    @pytest.mark.asyncio
    async def test_commits_on_success(self, mock_session):
        """Should commit once the request finishes cleanly."""
        generator = database.get_db_session()
        session = await generator.__anext__()

        with pytest.raises(StopAsyncIteration):
            await generator.__anext__()

        assert session is mock_session
        mock_session.commit.assert_awaited_once()
        mock_session.rollback.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rolls_back_on_error(self, mock_session):
        """Should roll back and re-raise when the request fails."""
        generator = database.get_db_session()
        await generator.__anext__()

        with pytest.raises(ValueError):
            await generator.athrow(ValueError("boom"))

        mock_session.rollback.assert_awaited_once()
        mock_session.commit.assert_not_awaited()


class TestEngineLifecycle:
    """Tests for lazy engine creation and disposal."""

    @pytest.mark.asyncio
    async def test_sqlite_url_creates_engine_once(self, monkeypatch):
        """Should build one engine from DATABASE_URL and reuse it."""
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
        await database.dispose_engine()

        engine = database.get_engine()

        assert engine.dialect.name == "sqlite"
        assert database.get_engine() is engine

        await database.dispose_engine()
        assert database._engine is None
        assert database._async_session_factory is None
