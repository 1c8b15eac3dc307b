# File: tests/test_seed_and_feed.py

import json

from bobo_site.core.exceptions import StorageFault
from bobo_site.db.init_db import seed_initial_data
from bobo_site.db.seed import SHOWCASE_PROJECTS
from bobo_site.services.project_repository import ProjectRepository
from export_static_feed import export_feed


def test_seed_runs_once(db, repo):
    assert seed_initial_data(db) == len(SHOWCASE_PROJECTS)
    assert seed_initial_data(db) == 0

    projects = repo.list()
    assert len(projects) == len(SHOWCASE_PROJECTS)
    assert projects[0].year == 2018


def test_export_feed_writes_list_in_order(db, repo, feed_path):
    seed_initial_data(db)

    count = export_feed(repo, feed_path)

    records = json.loads(feed_path.read_text(encoding="utf-8"))
    assert count == len(records) == len(SHOWCASE_PROJECTS)
    assert [r["title"] for r in records] == [p.title for p in repo.list()]
    assert {"id", "title", "poster_local", "created_at"} <= set(records[0])


def test_site_projects_endpoint_uses_live_data(client):
    client.post("/projects", data={"title": "Series", "year": "2019", "category": "tv"})
    client.post("/projects", data={"title": "Feature", "year": "2020"})

    resp = client.get("/site/projects")

    assert resp.status_code == 200
    view = resp.json()
    assert view["source"] == "live"
    assert [s["category"] for s in view["sections"]] == ["film", "tv"]


def test_site_projects_endpoint_falls_back_to_feed(client, feed_path, monkeypatch):
    feed_path.parent.mkdir(parents=True)
    feed_path.write_text(json.dumps([{"id": 1, "title": "Cached", "year": 2018}]))

    def broken_list(self):
        raise StorageFault("database is locked", operation="list")

    monkeypatch.setattr(ProjectRepository, "list", broken_list)

    view = client.get("/site/projects").json()

    assert view["source"] == "static"
    assert view["sections"][0]["cards"][0]["title"] == "Cached"


def test_site_projects_endpoint_error_state(client, monkeypatch):
    def broken_list(self):
        raise StorageFault("database is locked", operation="list")

    monkeypatch.setattr(ProjectRepository, "list", broken_list)

    resp = client.get("/site/projects")

    assert resp.status_code == 200
    assert resp.json()["message"] == "Unable to load projects."


def test_site_embed_endpoint(client):
    resp = client.get("/site/embed", params={"url": "https://youtu.be/eFynkQl9Gek"})
    assert resp.status_code == 200
    assert resp.json()["embed_url"] == "https://www.youtube.com/embed/eFynkQl9Gek?autoplay=1&rel=0"
