# File: bobo_site/services/project_repository.py

"""
CRUD for project rows, keeping uploaded posters in step with the rows
that reference them.
"""

from typing import List, Optional

from loguru import logger
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bobo_site.core.exceptions import NotFoundError, StorageFault, ValidationError
from bobo_site.models.project import Project
from bobo_site.schemas.project import EDITABLE_FIELDS, ProjectFields
from bobo_site.services.asset_store import AssetStore, PosterUpload


# Largest value SQLite can store in an INTEGER column
MAX_ID = 2**63 - 1


class ProjectRepository:
    def __init__(self, db: Session, assets: AssetStore):
        self.db = db
        self.assets = assets

    # -----------------------------
    # READ
    # -----------------------------
    def list(self) -> List[Project]:
        """
        All projects, newest year first (no year last), then by title.
        """
        stmt = select(Project).order_by(
            Project.year.is_(None),
            Project.year.desc(),
            Project.title.asc(),
        )
        try:
            return list(self.db.scalars(stmt))
        except SQLAlchemyError as exc:
            raise StorageFault(f"Could not list projects: {exc}", operation="list") from exc

    def get(self, project_id: int) -> Project:
        if not 1 <= project_id <= MAX_ID:
            raise NotFoundError(project_id)
        try:
            project = self.db.get(Project, project_id)
        except SQLAlchemyError as exc:
            raise StorageFault(f"Could not load project: {exc}", operation="get") from exc
        if project is None:
            raise NotFoundError(project_id)
        return project

    # -----------------------------
    # WRITE
    # -----------------------------
    def create(self, fields: ProjectFields, upload: Optional[PosterUpload] = None) -> Project:
        self._require_title(fields)

        # File first, row second: a crash in between leaves an orphaned file only
        poster_local = self.assets.store(upload) if upload is not None else None

        project = Project(poster_local=poster_local, **self._values(fields))
        self._commit(project, operation="create")

        logger.info(f"Created project | id={project.id} | title={project.title}")
        return project

    def update(
        self,
        project_id: int,
        fields: ProjectFields,
        upload: Optional[PosterUpload] = None,
    ) -> Project:
        project = self.get(project_id)
        self._require_title(fields)

        if upload is not None:
            # Reject a bad file before touching the current poster
            self.assets.validate(upload)
            if project.poster_local:
                self.assets.remove(project.poster_local)
                # The row must not keep pointing at the deleted file if storing fails
                project.poster_local = None
                self._commit(project, operation="update")
            project.poster_local = self.assets.store(upload)

        # Full replace: fields the caller left out become None
        for name, value in self._values(fields).items():
            setattr(project, name, value)
        project.updated_at = func.now()

        self._commit(project, operation="update")
        logger.info(f"Updated project | id={project.id}")
        return project

    def delete(self, project_id: int) -> None:
        project = self.get(project_id)

        if project.poster_local:
            try:
                self.assets.remove(project.poster_local)
            except StorageFault as exc:
                # The row still goes; the file is left behind
                logger.error(f"Poster left orphaned | id={project_id} | error={exc.message}")

        try:
            self.db.delete(project)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageFault(f"Could not delete project: {exc}", operation="delete") from exc

        logger.info(f"Deleted project | id={project_id}")

    # -----------------------------
    # HELPERS
    # -----------------------------
    @staticmethod
    def _require_title(fields: ProjectFields) -> None:
        if not fields.title:
            raise ValidationError("Title is required", field="title")

    @staticmethod
    def _values(fields: ProjectFields) -> dict:
        return {name: getattr(fields, name) for name in EDITABLE_FIELDS}

    def _commit(self, project: Project, operation: str) -> None:
        try:
            self.db.add(project)
            self.db.commit()
            self.db.refresh(project)
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageFault(f"Could not {operation} project: {exc}", operation=operation) from exc
