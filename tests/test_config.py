import pytest
from pydantic import ValidationError

from filter_docs.config import DocumentSettings
from filter_docs.document.route import Method


class TestDocumentSettings:
    def test_defaults(self):
        settings = DocumentSettings()
        assert settings.title == "API"
        assert settings.default_method == Method.POST
        assert settings.default_mime == "*/*"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("FILTER_DOCS_TITLE", "Pets")
        monkeypatch.setenv("FILTER_DOCS_VERSION", "1.2.3")
        monkeypatch.setenv("FILTER_DOCS_DEFAULT_METHOD", "get")
        settings = DocumentSettings.from_env()
        assert settings.title == "Pets"
        assert settings.version == "1.2.3"
        assert settings.default_method == Method.GET

    def test_from_env_defaults(self, monkeypatch):
        for name in ("FILTER_DOCS_TITLE", "FILTER_DOCS_VERSION", "FILTER_DOCS_DEFAULT_METHOD"):
            monkeypatch.delenv(name, raising=False)
        assert DocumentSettings.from_env() == DocumentSettings()

    def test_unknown_method_rejected(self, monkeypatch):
        monkeypatch.setenv("FILTER_DOCS_DEFAULT_METHOD", "CONNECT")
        with pytest.raises(ValidationError):
            DocumentSettings.from_env()
