"""Backend fixtures: app client over a throwaway SQLite database"""
import pytest
from httpx import ASGITransport, AsyncClient

from backend import db, settings
from backend.db_init import init_db
from backend.main import app


@pytest.fixture
async def client(tmp_path, monkeypatch):
    """HTTP client for API testing"""
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'timeline.db'}")
    settings.reset_settings()
    await db.dispose_engine()
    await init_db()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    await db.dispose_engine()
    settings.reset_settings()
