# File: tests/test_asset_store.py

import re

import pytest

from bobo_site.core.exceptions import StorageFault, ValidationError
from bobo_site.services.asset_store import AssetStore, PosterUpload


def test_store_creates_directory_and_returns_public_path(assets, png_upload):
    assert not assets.root.exists()

    path = assets.store(png_upload)

    assert re.fullmatch(r"/uploads/posters/\d+-\d+\.png", path)
    stored = assets.path_for(path)
    assert stored.exists()
    assert stored.read_bytes() == png_upload.data


def test_store_never_uses_client_filename(assets, png_bytes):
    upload = PosterUpload.from_filename(png_bytes, "../../etc/evil name.PNG", "image/png")

    path = assets.store(upload)

    assert "evil" not in path
    assert path.endswith(".png")
    assert assets.path_for(path).parent == assets.root.resolve()


def test_store_generates_unique_names(assets, png_upload):
    paths = {assets.store(png_upload) for _ in range(5)}
    assert len(paths) == 5


@pytest.mark.parametrize("filename", ["poster.jpg", "poster.JPEG", "poster.png", "poster.webp"])
def test_allowed_extensions(assets, png_bytes, filename):
    assets.store(PosterUpload.from_filename(png_bytes, filename))


@pytest.mark.parametrize("filename", ["poster.gif", "poster.svg", "poster", "poster.png.exe"])
def test_rejects_other_extensions_without_writing(assets, png_bytes, filename):
    with pytest.raises(ValidationError):
        assets.store(PosterUpload.from_filename(png_bytes, filename))
    assert not assets.root.exists()


def test_rejects_non_image_content_type(assets, png_bytes):
    upload = PosterUpload.from_filename(png_bytes, "poster.png", "text/html")
    with pytest.raises(ValidationError):
        assets.store(upload)


def test_rejects_files_over_the_limit(tmp_path):
    store = AssetStore(tmp_path / "posters", max_bytes=5 * 1024 * 1024)
    upload = PosterUpload(data=b"\x00" * (5 * 1024 * 1024 + 1), extension=".jpg")

    with pytest.raises(ValidationError) as excinfo:
        store.store(upload)

    assert "size limit" in excinfo.value.message
    assert not store.root.exists()


def test_file_at_the_limit_is_accepted(tmp_path):
    store = AssetStore(tmp_path / "posters", max_bytes=1024)
    store.store(PosterUpload(data=b"\x00" * 1024, extension="jpg"))


def test_remove_deletes_file(assets, png_upload):
    path = assets.store(png_upload)

    assets.remove(path)

    assert not assets.path_for(path).exists()


def test_remove_missing_file_is_noop(assets, png_upload):
    path = assets.store(png_upload)
    assets.remove(path)
    assets.remove(path)
    assets.remove(None)
    assets.remove("")


def test_remove_ignores_paths_outside_the_store(tmp_path, assets, png_upload):
    assets.store(png_upload)
    outside = tmp_path / "keep.txt"
    outside.write_text("keep")

    assets.remove("/uploads/posters/../../keep.txt")

    assert outside.exists()


def test_remove_failure_is_a_storage_fault(assets, png_upload, monkeypatch):
    path = assets.store(png_upload)

    def broken_unlink(self, missing_ok=False):
        raise PermissionError("read-only")

    monkeypatch.setattr(type(assets.path_for(path)), "unlink", broken_unlink)

    with pytest.raises(StorageFault):
        assets.remove(path)
