# File: bobo_site/services/asset_store.py

"""
Filesystem storage for uploaded poster images.

Files live in <uploads_dir>/posters under server-generated names and are
referenced from the database by their public path (/uploads/posters/<name>).
The store knows nothing about the database: callers keep the row and the
file in sync.
"""

import os
import random
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from loguru import logger

from bobo_site.core.exceptions import StorageFault, ValidationError

ALLOWED_EXTENSIONS = {".jpg", ".jpeg", ".png", ".webp"}
ALLOWED_CONTENT_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/webp"}
PUBLIC_PREFIX = "/uploads/posters/"


@dataclass
class PosterUpload:
    data: bytes
    extension: str
    content_type: Optional[str] = None

    @classmethod
    def from_filename(
        cls, data: bytes, filename: Optional[str], content_type: Optional[str] = None
    ) -> "PosterUpload":
        # Only the extension of the client's name is kept
        return cls(
            data=data,
            extension=os.path.splitext(filename or "")[1],
            content_type=content_type,
        )


class AssetStore:
    def __init__(self, root: Path, max_bytes: int = 5 * 1024 * 1024):
        self.root = Path(root)
        self.max_bytes = max_bytes

    # -----------------------------
    # VALIDATION
    # -----------------------------
    def validate(self, upload: PosterUpload) -> str:
        """
        Check type and size of an upload. Returns the normalized extension.
        """
        ext = (upload.extension or "").lower()
        if ext and not ext.startswith("."):
            ext = f".{ext}"

        if ext not in ALLOWED_EXTENSIONS:
            raise ValidationError(
                "Only image files are allowed (jpg, jpeg, png, webp)", field="poster"
            )

        if upload.content_type and upload.content_type.lower() not in ALLOWED_CONTENT_TYPES:
            raise ValidationError(
                "Only image files are allowed (jpg, jpeg, png, webp)", field="poster"
            )

        if len(upload.data) > self.max_bytes:
            raise ValidationError(
                f"Poster exceeds the {self.max_bytes // (1024 * 1024)} MB size limit",
                field="poster",
            )

        return ext

    def _generate_name(self, ext: str) -> str:
        millis = int(time.time() * 1000)
        return f"{millis}-{random.randint(0, 10**9)}{ext}"

    # -----------------------------
    # STORE / REMOVE
    # -----------------------------
    def store(self, upload: PosterUpload) -> str:
        """
        Persist an upload under a fresh name and return its public path.
        Nothing is written when validation fails.
        """
        ext = self.validate(upload)

        try:
            self.root.mkdir(parents=True, exist_ok=True)

            name = self._generate_name(ext)
            while (self.root / name).exists():
                name = self._generate_name(ext)

            with open(self.root / name, "wb") as f:
                f.write(upload.data)
        except OSError as exc:
            raise StorageFault(f"Could not write poster: {exc}", operation="store") from exc

        logger.info(f"Stored poster | name={name} | bytes={len(upload.data)}")
        return f"{PUBLIC_PREFIX}{name}"

    def path_for(self, relative_path: str) -> Optional[Path]:
        """
        Map a public /uploads/posters/... path back to a file under root.
        Returns None for anything that would land outside root.
        """
        name = relative_path
        if name.startswith(PUBLIC_PREFIX):
            name = name[len(PUBLIC_PREFIX):]

        root = self.root.resolve()
        candidate = (root / name).resolve()
        if candidate.parent != root:
            return None
        return candidate

    def remove(self, relative_path: Optional[str]) -> None:
        """
        Delete a stored poster. Missing files are fine.
        """
        if not relative_path:
            return

        path = self.path_for(relative_path)
        if path is None:
            logger.warning(f"Refusing to remove poster outside store | path={relative_path}")
            return

        try:
            path.unlink()
        except FileNotFoundError:
            logger.debug(f"Poster already gone | path={relative_path}")
            return
        except OSError as exc:
            raise StorageFault(f"Could not remove poster: {exc}", operation="remove") from exc

        logger.info(f"Removed poster | path={relative_path}")
