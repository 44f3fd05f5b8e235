import json
from pathlib import Path

import pytest
import yaml

from filter_docs.document.aggregate import describe
from filter_docs.filters.path import get, param, path
from filter_docs.openapi.export import detect_format, dump_document, write_document
from filter_docs.openapi.translate import to_openapi


def _document():
    return to_openapi(describe(path("pets") & param("petId", int) & get()))


class TestDetectFormat:
    def test_yaml_suffixes(self):
        assert detect_format(Path("openapi.yaml")) == "yaml"
        assert detect_format(Path("openapi.YML")) == "yaml"

    def test_json_suffix(self):
        assert detect_format(Path("openapi.json")) == "json"

    def test_unknown_suffix(self):
        with pytest.raises(ValueError):
            detect_format(Path("openapi.txt"))


class TestDumpDocument:
    def test_yaml_loads_back(self):
        data = yaml.safe_load(dump_document(_document(), "yaml"))
        assert data["openapi"] == "3.0.0"
        parameter = data["paths"]["/pets/{petId}"]["get"]["parameters"][0]
        assert parameter["in"] == "path"

    def test_yaml_keeps_document_order(self):
        text = dump_document(_document(), "yaml")
        assert text.index("openapi:") < text.index("info:") < text.index("paths:")

    def test_json_loads_back(self):
        data = json.loads(dump_document(_document(), "json"))
        assert "/pets/{petId}" in data["paths"]

    def test_unknown_format(self):
        with pytest.raises(ValueError):
            dump_document(_document(), "toml")


class TestWriteDocument:
    def test_writes_yaml_and_creates_dirs(self, tmp_path):
        out = write_document(_document(), tmp_path / "docs" / "openapi.yaml")
        assert out.exists()
        data = yaml.safe_load(out.read_text(encoding="utf-8"))
        assert data["info"]["title"] == "API"

    def test_writes_json(self, tmp_path):
        out = write_document(_document(), tmp_path / "openapi.json")
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["paths"]["/pets/{petId}"]["get"]["parameters"][0]["name"] == "petId"
