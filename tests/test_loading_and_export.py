import json

import pytest
import requests

from uml_explorer import utils
from uml_explorer.codegen.core.model import Language
from uml_explorer.export import ExportError, write_artifacts, write_text
from uml_explorer.utils import ProjectLoaderError, load_json_from_url, load_project


class FakeResponse:
    def __init__(self, payload=None, status_code=200, bad_json=False):
        self.payload = payload
        self.status_code = status_code
        self.bad_json = bad_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(response=self)

    def json(self):
        if self.bad_json:
            raise ValueError("not json")
        return self.payload


def _write_json(tmp_path, data, name="project.json"):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_project_from_file(tmp_path, project_description):
    path = _write_json(tmp_path, project_description)
    source, project = load_project(file_path=path)

    assert source == str(path)
    assert project.language == Language.C
    assert [c.name for c in project.classes] == ["Counter", "Log"]


def test_load_project_file_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_project(file_path=tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{", encoding="utf-8")
    with pytest.raises(ProjectLoaderError, match="Invalid JSON"):
        load_project(file_path=broken)

    bad_kind = _write_json(tmp_path, {"classes": [{"kind": "struct"}]}, "bad.json")
    with pytest.raises(ProjectLoaderError, match="Invalid project description"):
        load_project(file_path=bad_kind)

    bad_generic = _write_json(
        tmp_path, {"classes": [{"name": "Box", "genericParam": 5}]}, "generic.json"
    )
    with pytest.raises(ProjectLoaderError, match="generic parameter"):
        load_project(file_path=bad_generic)


def test_load_project_needs_exactly_one_source(tmp_path):
    with pytest.raises(ProjectLoaderError):
        load_project()
    with pytest.raises(ProjectLoaderError):
        load_project(file_path=tmp_path / "a.json", url="https://example.com/a.json")


def test_load_project_from_url(monkeypatch, project_description):
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return FakeResponse(project_description)

    monkeypatch.setattr(utils.requests, "get", fake_get)
    source, project = load_project(url="https://example.com/p.json", timeout=5)

    assert source == "https://example.com/p.json"
    assert calls == [("https://example.com/p.json", 5)]
    assert len(project.classes) == 2


@pytest.mark.parametrize(
    "response, message",
    [
        (FakeResponse(status_code=404), "HTTP error 404"),
        (FakeResponse(bad_json=True), "Invalid JSON response"),
    ],
)
def test_load_json_from_url_errors(monkeypatch, response, message):
    monkeypatch.setattr(utils.requests, "get", lambda url, timeout: response)
    with pytest.raises(ProjectLoaderError, match=message):
        load_json_from_url("https://example.com/p.json")


def test_load_json_from_url_connection_error(monkeypatch):
    def fail(url, timeout):
        raise requests.exceptions.ConnectionError("refused")

    monkeypatch.setattr(utils.requests, "get", fail)
    with pytest.raises(ProjectLoaderError, match="Connection error"):
        load_json_from_url("https://example.com/p.json")


def test_invalid_url():
    with pytest.raises(ProjectLoaderError, match="Invalid URL"):
        load_json_from_url("not a url")


def test_write_artifacts(tmp_path):
    out = tmp_path / "build"
    paths = write_artifacts({"generated.h": "#pragma once", "generated.c": "int x;"}, out)

    assert paths == [out / "generated.h", out / "generated.c"]
    assert (out / "generated.h").read_text(encoding="utf-8") == "#pragma once"
    assert (out / "generated.c").read_text(encoding="utf-8") == "int x;"


def test_write_text_keeps_unicode(tmp_path):
    path = write_text(tmp_path / "diagram.txt", "«interface» 𝐴")
    assert path.read_text(encoding="utf-8") == "«interface» 𝐴"


def test_write_text_error(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    with pytest.raises(ExportError):
        write_text(blocker / "nested.txt", "x")
