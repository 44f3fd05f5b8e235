"""Cookie filters."""

from filter_docs.document import route as doc
from filter_docs.document.explicit import Explicit, explicit
from filter_docs.filters.base import Filter, MatchState
from filter_docs.filters.reject import MissingCookie


class CookieValue(Filter):
    def __init__(self, name: str, required: bool = True):
        self.name = name
        self.required = required

    def extract(self, state: MatchState) -> tuple[tuple, MatchState]:
        value = state.request.cookies.get(self.name)
        if value is None and self.required:
            raise MissingCookie(self.name)
        return (value,), state


def cookie(name: str, description: str | None = None) -> Explicit:
    """Require a cookie by name, extracting its value.

    Documented as a required cookie plus a 400 response.
    """
    return explicit(
        CookieValue(name),
        lambda route: route.with_response(400, doc.response("Bad Request")).with_cookie(
            doc.cookie(name, required=True, description=description)
        ),
    )


def optional_cookie(name: str, description: str | None = None) -> Explicit:
    """Extract a cookie by name, or None when it is absent."""
    return explicit(
        CookieValue(name, required=False),
        lambda route: route.with_cookie(doc.cookie(name, required=False, description=description)),
    )
