# File: bobo_site/api/v1/routes_site.py

"""
Read-only endpoints for the public page script.
"""

from pathlib import Path

from fastapi import APIRouter, Depends, Query

from bobo_site.api.deps import get_repository, get_static_feed_path
from bobo_site.services.project_repository import ProjectRepository
from bobo_site.services.site_renderer import embed_url, load_site_view

router = APIRouter()


@router.get("/projects", summary="Project cards grouped by category")
def site_projects(
    repo: ProjectRepository = Depends(get_repository),
    feed_path: Path = Depends(get_static_feed_path),
):
    """
    Cards for the public grid. Falls back to the static feed when the
    database is unavailable and to an error message when both are; this
    endpoint itself always answers 200.
    """
    return load_site_view(repo.list, feed_path)


@router.get("/embed", summary="Embed URL for a trailer link")
def trailer_embed(url: str = Query(..., min_length=1)):
    return {"url": url, "embed_url": embed_url(url)}
