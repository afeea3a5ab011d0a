"""Tests for metadata loading."""

from __future__ import annotations

from pathlib import Path

import pytest
import requests

from wrapgen import utils
from wrapgen.utils import MetadataLoaderError, load_components


class FakeResponse:
    def __init__(self, payload, status_code: int = 200, content_type: str = "application/json"):
        self._payload = payload
        self.status_code = status_code
        self.headers = {"content-type": content_type}

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(response=self)

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


def test_load_components_from_file(metadata_file: Path) -> None:
    source, components = load_components(file_path=metadata_file)

    assert source == str(metadata_file)
    assert [c.tag_name for c in components] == ["my-input", "my-button", "my-internal"]
    assert components[0].properties[1].type == "boolean"


def test_load_components_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_components(file_path=tmp_path / "absent.json")


def test_load_components_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{", encoding="utf-8")

    with pytest.raises(MetadataLoaderError):
        load_components(file_path=path)


def test_load_components_invalid_document(tmp_path: Path) -> None:
    path = tmp_path / "doc.json"
    path.write_text('{"components": [{"props": []}]}', encoding="utf-8")

    with pytest.raises(MetadataLoaderError):
        load_components(file_path=path)


def test_load_components_requires_exactly_one_source(metadata_file: Path) -> None:
    with pytest.raises(MetadataLoaderError):
        load_components()
    with pytest.raises(MetadataLoaderError):
        load_components(file_path=metadata_file, url="https://example.com/c.json")


def test_load_components_from_url(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return FakeResponse([{"tagName": "remote-el"}])

    monkeypatch.setattr(utils.requests, "get", fake_get)

    source, components = load_components(url="https://example.com/c.json", timeout=5)

    assert calls == [("https://example.com/c.json", 5)]
    assert source == "https://example.com/c.json"
    assert components[0].tag_name == "remote-el"


def test_load_components_url_http_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        utils.requests, "get", lambda url, timeout: FakeResponse({}, status_code=404)
    )

    with pytest.raises(MetadataLoaderError, match="404"):
        load_components(url="https://example.com/c.json")


def test_load_components_url_bad_json(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        utils.requests, "get", lambda url, timeout: FakeResponse(ValueError("nope"))
    )

    with pytest.raises(MetadataLoaderError):
        load_components(url="https://example.com/c.json")


def test_load_components_rejects_invalid_url() -> None:
    with pytest.raises(MetadataLoaderError):
        load_components(url="not a url")
