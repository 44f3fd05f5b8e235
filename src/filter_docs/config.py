"""Settings for generated OpenAPI documents."""

import os

from pydantic import BaseModel

from filter_docs.document.route import Method


class DocumentSettings(BaseModel):
    title: str = "API"
    version: str = "0.1.0"
    description: str | None = None
    # Routes that never documented a method land in this slot.
    default_method: Method = Method.POST
    default_mime: str = "*/*"

    @classmethod
    def from_env(cls) -> "DocumentSettings":
        return cls(
            title=os.getenv("FILTER_DOCS_TITLE", "API"),
            version=os.getenv("FILTER_DOCS_VERSION", "0.1.0"),
            default_method=os.getenv("FILTER_DOCS_DEFAULT_METHOD", "POST").upper(),
        )
