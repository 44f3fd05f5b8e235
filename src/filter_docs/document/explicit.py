"""Explicit documentation for filters whose routes cannot be inferred."""

from typing import Callable

from filter_docs.document.route import RouteDocumentation
from filter_docs.filters.base import Filter, MatchState

DocumentCallback = Callable[[RouteDocumentation], RouteDocumentation]


class Explicit(Filter):
    """Wrap `inner`, replacing its documentation with `callback`.

    Matching is delegated to `inner` unchanged. Documentation from `inner`
    is ignored: `describe` returns exactly one record, the incoming record
    passed through `callback`.
    """

    def __init__(self, inner: Filter, callback: DocumentCallback):
        self.inner = inner
        self.callback = callback

    def extract(self, state: MatchState) -> tuple[tuple, MatchState]:
        return self.inner.extract(state)

    def describe(self, route: RouteDocumentation) -> list[RouteDocumentation]:
        return [self.callback(route)]


def explicit(inner: Filter, callback: DocumentCallback) -> Explicit:
    return Explicit(inner, callback)
