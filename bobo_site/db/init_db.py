"""
Database initialization helpers.

Importing Project registers its table on Base.metadata.
"""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from bobo_site.db.seed import SHOWCASE_PROJECTS
from bobo_site.models.base import Base
from bobo_site.models.project import Project


def init_db(engine: Engine) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=engine)


def seed_initial_data(db: Session) -> int:
    """
    Insert the showcase projects when the table is empty.
    Returns the number of rows inserted.
    """
    if db.query(Project).count() > 0:
        return 0

    for values in SHOWCASE_PROJECTS:
        db.add(Project(**values))
    db.commit()

    logger.info(f"Database seeded with {len(SHOWCASE_PROJECTS)} initial projects")
    return len(SHOWCASE_PROJECTS)
