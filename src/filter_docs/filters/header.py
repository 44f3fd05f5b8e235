"""Header filters."""

from filter_docs.document import route as doc
from filter_docs.document.explicit import Explicit, explicit
from filter_docs.filters.base import Filter, MatchState
from filter_docs.filters.reject import MissingHeader


class HeaderValue(Filter):
    """Extract a header value; missing optional headers extract None."""

    def __init__(self, name: str, required: bool = True):
        self.name = name
        self.required = required

    def extract(self, state: MatchState) -> tuple[tuple, MatchState]:
        value = state.request.header(self.name)
        if value is None and self.required:
            raise MissingHeader(self.name)
        return (value,), state


class ExactHeader(Filter):
    """Require a header with an exact value, extracting nothing."""

    def __init__(self, name: str, value: str):
        self.name = name
        self.value = value

    def extract(self, state: MatchState) -> tuple[tuple, MatchState]:
        if state.request.header(self.name) != self.value:
            raise MissingHeader(self.name)
        return (), state


def header(name: str, description: str | None = None) -> Explicit:
    """Require a header by name, extracting its value."""
    return explicit(
        HeaderValue(name),
        lambda route: route.with_response(400, doc.response("Bad Request")).with_header(
            doc.header(name, required=True, description=description)
        ),
    )


def optional_header(name: str, description: str | None = None) -> Explicit:
    return explicit(
        HeaderValue(name, required=False),
        lambda route: route.with_header(doc.header(name, required=False, description=description)),
    )


def exact(name: str, value: str) -> Explicit:
    return explicit(
        ExactHeader(name, value),
        lambda route: route.with_response(400, doc.response("Bad Request")).with_header(
            doc.header(name, required=True, description=f"Must be {value!r}")
        ),
    )
