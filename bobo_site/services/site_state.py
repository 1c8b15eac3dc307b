# File: bobo_site/services/site_state.py

"""
Interaction state for the public page: overlay panels, trailer modal,
theme preference and the hero slideshow.

These hold the rules the page script follows (one panel at a time, scroll
locked while something is open, theme remembered between visits) without
any DOM in them.
"""

import random
from typing import MutableMapping, Optional, Sequence

from bobo_site.services.site_renderer import embed_url

DARK = "dark"
LIGHT = "light"
THEME_KEY = "theme"

PANELS = ("services", "work", "team", "contact")

DEFAULT_HEADER_COLOR = "var(--bg-primary)"
PANEL_COLORS = {
    DARK: {
        "services": "rgb(180, 100, 60)",
        "work": "rgb(26, 31, 28)",
        "team": "rgb(180, 100, 60)",
        "contact": "rgb(26, 31, 28)",
    },
    LIGHT: {panel: "#f7f4ef" for panel in PANELS},
}

SLIDESHOW_INTERVAL_SECONDS = 20


class Page:
    """Page-wide flags shared by the overlay and the modal."""

    def __init__(self):
        self.scroll_locked = False


class ThemePreference:
    """
    Two visual modes, remembered in a key/value store (browser localStorage
    on the real page, any dict here).
    """

    def __init__(self, store: MutableMapping[str, str]):
        self.store = store
        self.mode = LIGHT if store.get(THEME_KEY) == LIGHT else DARK

    @property
    def is_light(self) -> bool:
        return self.mode == LIGHT

    @property
    def toggle_label(self) -> str:
        return "Color" if self.is_light else "B&W"

    def toggle(self) -> str:
        self.mode = DARK if self.is_light else LIGHT
        self.store[THEME_KEY] = self.mode
        return self.mode


class OverlayPanels:
    def __init__(self, page: Page, theme: ThemePreference):
        self.page = page
        self.theme = theme
        self.active: Optional[str] = None

    @property
    def header_color(self) -> str:
        if self.active is None:
            return DEFAULT_HEADER_COLOR
        return PANEL_COLORS[self.theme.mode][self.active]

    def open(self, panel: str) -> bool:
        if panel not in PANELS:
            return False
        self.close_all()
        self.active = panel
        self.page.scroll_locked = True
        return True

    def close_all(self) -> None:
        self.active = None
        self.page.scroll_locked = False


class TrailerModal:
    def __init__(self, page: Page):
        self.page = page
        self.src = ""

    @property
    def is_open(self) -> bool:
        return bool(self.src)

    def open(self, trailer_url: Optional[str]) -> bool:
        if not trailer_url:
            return False
        self.src = embed_url(trailer_url)
        self.page.scroll_locked = True
        return True

    def close(self) -> None:
        self.src = ""
        self.page.scroll_locked = False


class Slideshow:
    def __init__(self, images: Sequence[str], rng: Optional[random.Random] = None):
        if not images:
            raise ValueError("Slideshow needs at least one image")
        self.images = list(images)
        self.index = (rng or random).randrange(len(self.images))

    @property
    def current(self) -> str:
        return self.images[self.index]

    def next(self) -> str:
        self.index = (self.index + 1) % len(self.images)
        return self.current
