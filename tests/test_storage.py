import io
import os
from unittest import mock

import pytest
from icon2png import storage
from icon2png.storage import (
    DEFAULT_FOLDER_NAME, FileSystemStorage, UrlStorage, default_export_folder,
    get_storage, read_svg, save_icon_file)


@pytest.mark.parametrize("key, value", [
    ("foo", b"bar"),
    ("sub/dir/icon.png", b"\x89PNG"),
])
def test_file_readwrite(tmp_path, key, value):
    fs = get_storage(str(tmp_path))
    assert isinstance(fs, FileSystemStorage)
    fs.put(key, value)
    assert fs.exists(key)
    assert fs.get(key) == value
    with fs.open(key) as f:
        assert f.read() == value
    assert fs.url(key) == os.path.abspath(os.path.join(str(tmp_path), key))


def test_get_storage_url():
    assert isinstance(get_storage("https://api.iconify.design/"), UrlStorage)


def test_save_icon_file(tmp_path):
    path = tmp_path / "out" / "icon.png"
    save_icon_file(str(path), b"data")
    assert path.read_bytes() == b"data"

    save_icon_file(str(path), "<svg/>")
    assert path.read_text(encoding="utf-8") == "<svg/>"


def test_save_icon_file_error(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_bytes(b"")
    with pytest.raises(OSError):
        save_icon_file(str(blocker / "icon.png"), b"data")


def test_default_export_folder(tmp_path):
    folder = default_export_folder(str(tmp_path))
    assert folder == os.path.join(str(tmp_path), DEFAULT_FOLDER_NAME)
    assert os.path.isdir(folder)
    # Idempotent.
    assert default_export_folder(str(tmp_path)) == folder


def test_default_export_folder_uses_download_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_DOWNLOAD_DIR", str(tmp_path / "dl"))
    folder = default_export_folder()
    assert folder == os.path.join(str(tmp_path / "dl"), DEFAULT_FOLDER_NAME)
    assert os.path.isdir(folder)


def test_get_download_dir_home(tmp_path, monkeypatch):
    monkeypatch.delenv("XDG_DOWNLOAD_DIR", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert storage.get_download_dir() == os.path.join(str(tmp_path), "Downloads")


def test_read_svg_local(tmp_path):
    path = tmp_path / "icon.svg"
    path.write_text("<svg/>", encoding="utf-8")
    assert read_svg(str(path)) == "<svg/>"


def test_read_svg_url():
    response = mock.MagicMock()
    response.__enter__.return_value = io.BytesIO(b"<svg/>")
    with mock.patch("icon2png.storage.urlopen", return_value=response) as urlopen:
        assert read_svg("https://example.com/icons/home.svg") == "<svg/>"
    request = urlopen.call_args[0][0]
    assert request.full_url == "https://example.com/icons/home.svg"
    assert request.get_header("User-agent") == "icon2png"


def test_url_exists():
    from urllib.error import HTTPError
    url_storage = UrlStorage("https://example.com")
    assert url_storage.url("a.svg") == "https://example.com/a.svg"
    with mock.patch("icon2png.storage.urlopen", side_effect=HTTPError(
            "https://example.com/a.svg", 404, "Not Found", None, None)):
        assert not url_storage.exists("a.svg")
    with mock.patch("icon2png.storage.urlopen"):
        assert url_storage.exists("a.svg")


def test_url_storage_read_only():
    with pytest.raises(ValueError):
        with UrlStorage("https://example.com").open("a.svg", mode="wb"):
            pass
