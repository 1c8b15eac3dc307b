"""
Write the current project list to the static JSON feed.

Run this from the backend root:

    (.venv) python export_static_feed.py [output.json]

The public page reads this file when the live API is not reachable.
Records are written in list order with the same fields the API returns.
"""

import json
import sys
from pathlib import Path

from loguru import logger

from bobo_site.api.deps import get_asset_store
from bobo_site.core.config import settings
from bobo_site.db.init_db import init_db
from bobo_site.db.session import SessionLocal, engine
from bobo_site.schemas.project import ProjectRead
from bobo_site.services.project_repository import ProjectRepository


def export_feed(repo: ProjectRepository, output: Path) -> int:
    records = [ProjectRead.model_validate(p).model_dump(mode="json") for p in repo.list()]

    output.parent.mkdir(parents=True, exist_ok=True)
    with open(output, "w", encoding="utf-8") as f:
        json.dump(records, f, ensure_ascii=False, indent=2)

    return len(records)


def main() -> None:
    output = Path(sys.argv[1]) if len(sys.argv) > 1 else settings.static_feed_path

    init_db(engine)
    db = SessionLocal()
    try:
        count = export_feed(ProjectRepository(db, get_asset_store()), output)
        logger.info(f"Wrote {count} projects to {output}")
    finally:
        db.close()


if __name__ == "__main__":
    main()
