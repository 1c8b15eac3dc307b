# File: bobo_site/api/deps.py

from pathlib import Path

from fastapi import Depends
from sqlalchemy.orm import Session

from bobo_site.core.config import settings
from bobo_site.db.session import get_db
from bobo_site.services.asset_store import AssetStore
from bobo_site.services.project_repository import ProjectRepository


def get_asset_store() -> AssetStore:
    """
    Poster storage rooted at <uploads_dir>/posters.
    """
    return AssetStore(settings.posters_dir, max_bytes=settings.max_upload_bytes)


def get_repository(
    db: Session = Depends(get_db),
    assets: AssetStore = Depends(get_asset_store),
) -> ProjectRepository:
    """
    FastAPI dependency that provides a ProjectRepository bound to the
    request's session.

    Usage in route functions:
        repo: ProjectRepository = Depends(get_repository)
    """
    return ProjectRepository(db, assets)


def get_static_feed_path() -> Path:
    return settings.static_feed_path
