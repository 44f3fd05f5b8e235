"""Request body filters."""

import json

from filter_docs.document import route as doc
from filter_docs.document.route import RouteDocumentation
from filter_docs.document.types import TypeDescription
from filter_docs.filters.base import Filter, MatchState
from filter_docs.filters.reject import InvalidBody

JSON_MIME = "application/json"


class JsonBody(Filter):
    """Extract the request body parsed as JSON."""

    def __init__(self, body_type: TypeDescription | None = None):
        self.body_type = body_type

    def extract(self, state: MatchState) -> tuple[tuple, MatchState]:
        raw = state.request.body
        if raw is None or raw in ("", b""):
            raise InvalidBody("Request body is empty")
        try:
            value = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidBody(f"Request body is not valid JSON: {e}") from e
        return (value,), state

    def describe(self, route: RouteDocumentation) -> list[RouteDocumentation]:
        route = route.with_body(doc.body(self.body_type, mime=JSON_MIME))
        return [route.with_response(400, doc.response("Bad Request"))]


def json_body(body_type: TypeDescription | None = None) -> JsonBody:
    return JsonBody(body_type)
