# File: tests/conftest.py

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from bobo_site.api.deps import get_asset_store, get_static_feed_path
from bobo_site.db.init_db import init_db
from bobo_site.db.session import get_db, make_engine
from bobo_site.main import app
from bobo_site.services.asset_store import AssetStore, PosterUpload
from bobo_site.services.project_repository import ProjectRepository

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64
JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 64


@pytest.fixture
def engine(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'test.db'}")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def assets(tmp_path):
    return AssetStore(tmp_path / "uploads" / "posters")


@pytest.fixture
def repo(db, assets):
    return ProjectRepository(db, assets)


@pytest.fixture
def png_upload():
    return PosterUpload.from_filename(PNG_BYTES, "poster.png", "image/png")


@pytest.fixture
def feed_path(tmp_path):
    return tmp_path / "data" / "movies.json"


@pytest.fixture
def client(session_factory, assets, feed_path):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_asset_store] = lambda: assets
    app.dependency_overrides[get_static_feed_path] = lambda: feed_path

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def stored_files(assets):
    """Names of the poster files currently on disk."""

    def _list():
        if not assets.root.exists():
            return []
        return sorted(p.name for p in assets.root.iterdir())

    return _list


@pytest.fixture
def png_bytes():
    return PNG_BYTES


@pytest.fixture
def jpeg_bytes():
    return JPEG_BYTES
