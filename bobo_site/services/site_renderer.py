# File: bobo_site/services/site_renderer.py

"""
View models for the public site.

Everything here is a plain function of the project list: the page script
only has to draw what these return. Network and file access are confined
to load_site_view().
"""

import json
import re
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from loguru import logger

from bobo_site.models.project import CATEGORIES, FILM

EMPTY_MESSAGE = "No projects to display yet."
ERROR_MESSAGE = "Unable to load projects."

SECTION_TITLES = {"film": "Film", "tv": "TV"}

_YOUTUBE_ID = re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/)([^&]+)")


def embed_url(url: str) -> str:
    """
    Turn a YouTube watch / short link into an autoplaying embed URL.
    Anything else comes back unchanged.
    """
    match = _YOUTUBE_ID.search(url or "")
    if match and match.group(1):
        return f"https://www.youtube.com/embed/{match.group(1)}?autoplay=1&rel=0"
    return url


def _get(project: Any, name: str):
    if isinstance(project, Mapping):
        return project.get(name)
    return getattr(project, name, None)


def default_category(project: Any) -> str:
    category = _get(project, "category")
    return category if category in CATEGORIES else FILM


def sort_key(project: Any):
    year = _get(project, "year")
    # No year sorts after every real year
    return (year is None, -(year or 0), _get(project, "title") or "")


def build_card(project: Any, category: Optional[str] = None) -> Dict[str, Any]:
    """
    Card for a single project. Missing values are simply left out.
    """
    trailer = _get(project, "trailer_url") or None

    crew = []
    if _get(project, "dop"):
        crew.append({"label": "Director of Photography", "value": _get(project, "dop")})
    if _get(project, "bobo_crew"):
        crew.append({"label": "BO&BO", "value": _get(project, "bobo_crew")})

    links = []
    for label, name in (("IMDB", "imdb_url"), ("TMDB", "tmdb_url"), ("Trailer", "trailer_url")):
        if _get(project, name):
            links.append({"label": label, "url": _get(project, name)})

    card = {
        "id": _get(project, "id"),
        "title": _get(project, "title"),
        "year": _get(project, "year"),
        "category": category or default_category(project),
        "poster": _get(project, "poster_local") or _get(project, "poster_url") or None,
        "crew": crew,
        "links": links,
        "trailer_url": trailer,
        "embed_url": embed_url(trailer) if trailer else None,
        "clickable": bool(trailer),
    }
    return {k: v for k, v in card.items() if v is not None}


def build_site_view(
    projects: Iterable[Any],
    categorize: Callable[[Any], str] = default_category,
) -> Dict[str, Any]:
    """
    Group sorted projects into one section per category.
    """
    ordered = sorted(projects, key=sort_key)

    sections = []
    for category in CATEGORIES:
        cards = [build_card(p, category) for p in ordered if categorize(p) == category]
        if cards:
            sections.append(
                {"category": category, "title": SECTION_TITLES[category], "cards": cards}
            )

    view: Dict[str, Any] = {
        "sections": sections,
        "total": len(ordered),
        "message": None,
        "error": False,
    }
    if not ordered:
        view["message"] = EMPTY_MESSAGE
    return view


def error_view() -> Dict[str, Any]:
    return {"sections": [], "total": 0, "message": ERROR_MESSAGE, "error": True}


def read_static_feed(path: Path) -> List[Dict[str, Any]]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"Static feed {path} is not a list")
    return data


def load_site_view(
    live: Optional[Callable[[], Iterable[Any]]],
    feed_path: Optional[Path] = None,
    categorize: Callable[[Any], str] = default_category,
) -> Dict[str, Any]:
    """
    Build the site view from the live list, then the static feed, and as a
    last resort an error view. Never raises.
    """
    if live is not None:
        try:
            view = build_site_view(live(), categorize)
            view["source"] = "live"
            return view
        except Exception as exc:
            logger.warning(f"Live project list unavailable | error={exc}")

    if feed_path is not None:
        try:
            view = build_site_view(read_static_feed(feed_path), categorize)
            view["source"] = "static"
            return view
        except (OSError, ValueError, TypeError) as exc:
            logger.error(f"Static project feed unavailable | path={feed_path} | error={exc}")

    return error_view()
