# File: bobo_site/api/v1/routes_project.py

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from bobo_site.api.deps import get_asset_store, get_repository
from bobo_site.schemas.project import MessageResponse, ProjectFields, ProjectRead
from bobo_site.services.asset_store import AssetStore, PosterUpload
from bobo_site.services.project_repository import ProjectRepository

router = APIRouter()


def project_form(
    title: Optional[str] = Form(None),
    year: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    poster_url: Optional[str] = Form(None),
    dop: Optional[str] = Form(None),
    bobo_crew: Optional[str] = Form(None),
    imdb_url: Optional[str] = Form(None),
    tmdb_url: Optional[str] = Form(None),
    trailer_url: Optional[str] = Form(None),
    production_company: Optional[str] = Form(None),
    synopsis: Optional[str] = Form(None),
) -> ProjectFields:
    """
    Multipart fields as ProjectFields. Everything arrives as text; type
    checks happen in ProjectFields so a bad year is a 400, not a 422.
    """
    return ProjectFields.from_form(
        {
            "title": title,
            "year": year,
            "category": category,
            "poster_url": poster_url,
            "dop": dop,
            "bobo_crew": bobo_crew,
            "imdb_url": imdb_url,
            "tmdb_url": tmdb_url,
            "trailer_url": trailer_url,
            "production_company": production_company,
            "synopsis": synopsis,
        }
    )


def poster_upload(
    poster: Optional[UploadFile] = File(None),
    assets: AssetStore = Depends(get_asset_store),
) -> Optional[PosterUpload]:
    # Browsers send an empty part when the file input is left blank
    if poster is None or not poster.filename:
        return None

    # One byte past the limit is enough to know it is too big
    data = poster.file.read(assets.max_bytes + 1)
    return PosterUpload.from_filename(data, poster.filename, poster.content_type)


@router.get("", response_model=List[ProjectRead], summary="List projects")
def list_projects(repo: ProjectRepository = Depends(get_repository)):
    """
    All projects, newest year first; projects without a year come last.
    """
    return repo.list()


@router.get("/{project_id}", response_model=ProjectRead, summary="Get one project")
def get_project(project_id: int, repo: ProjectRepository = Depends(get_repository)):
    return repo.get(project_id)


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
)
def create_project(
    fields: ProjectFields = Depends(project_form),
    upload: Optional[PosterUpload] = Depends(poster_upload),
    repo: ProjectRepository = Depends(get_repository),
):
    """
    Create a project from multipart form data with an optional `poster` file.
    """
    return repo.create(fields, upload)


@router.put("/{project_id}", response_model=ProjectRead, summary="Replace project")
def update_project(
    project_id: int,
    fields: ProjectFields = Depends(project_form),
    upload: Optional[PosterUpload] = Depends(poster_upload),
    repo: ProjectRepository = Depends(get_repository),
):
    """
    Replace every editable field. Fields left out are cleared.
    A new `poster` file replaces (and deletes) the current one.
    """
    return repo.update(project_id, fields, upload)


@router.delete("/{project_id}", response_model=MessageResponse, summary="Delete project")
def delete_project(project_id: int, repo: ProjectRepository = Depends(get_repository)):
    repo.delete(project_id)
    return MessageResponse(message="Project deleted successfully")
