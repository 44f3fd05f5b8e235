"""Method and path filters."""

from filter_docs.document.route import Method, RouteDocumentation
from filter_docs.document.types import TypeDescription, type_for
from filter_docs.filters.base import Filter, MatchState, convert
from filter_docs.filters.reject import MethodNotAllowed, NotFound


class MethodFilter(Filter):
    def __init__(self, method: Method):
        self.method = Method(method)

    def extract(self, state: MatchState) -> tuple[tuple, MatchState]:
        if state.request.method != self.method:
            raise MethodNotAllowed(state.request.method.value)
        return (), state

    def describe(self, route: RouteDocumentation) -> list[RouteDocumentation]:
        return [route.with_method(self.method)]


class Segment(Filter):
    """Match one literal path segment."""

    def __init__(self, segment: str):
        self.segment = segment

    def extract(self, state: MatchState) -> tuple[tuple, MatchState]:
        if not state.segments or state.segments[0] != self.segment:
            raise NotFound(state.request.path)
        return (), state.advance()

    def describe(self, route: RouteDocumentation) -> list[RouteDocumentation]:
        return [route.with_segment(self.segment)]


class Param(Filter):
    """Extract one path segment converted to `python_type`.

    The documented type is derived from `python_type` unless
    `parameter_type` overrides it.
    """

    def __init__(
        self,
        name: str,
        python_type: type = str,
        description: str | None = None,
        parameter_type: TypeDescription | None = None,
    ):
        self.name = name
        self.python_type = python_type
        self.description = description
        self.parameter_type = parameter_type

    def extract(self, state: MatchState) -> tuple[tuple, MatchState]:
        if not state.segments:
            raise NotFound(state.request.path)
        try:
            value = convert(state.segments[0], self.python_type)
        except ValueError:
            raise NotFound(state.request.path) from None
        return (value,), state.advance()

    def describe(self, route: RouteDocumentation) -> list[RouteDocumentation]:
        parameter_type = self.parameter_type
        if parameter_type is None:
            parameter_type = type_for(self.python_type)
        return [route.with_parameter(self.name, parameter_type, self.description)]


class End(Filter):
    """Match only when the whole path has been consumed."""

    def extract(self, state: MatchState) -> tuple[tuple, MatchState]:
        if state.segments:
            raise NotFound(state.request.path)
        return (), state


def method(m: Method | str) -> MethodFilter:
    return MethodFilter(Method(m.upper()))


def get() -> MethodFilter:
    return MethodFilter(Method.GET)


def post() -> MethodFilter:
    return MethodFilter(Method.POST)


def put() -> MethodFilter:
    return MethodFilter(Method.PUT)


def delete() -> MethodFilter:
    return MethodFilter(Method.DELETE)


def patch() -> MethodFilter:
    return MethodFilter(Method.PATCH)


def head() -> MethodFilter:
    return MethodFilter(Method.HEAD)


def options() -> MethodFilter:
    return MethodFilter(Method.OPTIONS)


def path(literal: str) -> Filter:
    """Match literal segments; "users/active" matches two segments."""
    segments = [s for s in literal.split("/") if s]
    if not segments:
        raise ValueError("path() needs at least one segment")
    result: Filter = Segment(segments[0])
    for segment in segments[1:]:
        result = result & Segment(segment)
    return result


def param(
    name: str,
    python_type: type = str,
    description: str | None = None,
    parameter_type: TypeDescription | None = None,
) -> Param:
    return Param(name, python_type, description, parameter_type)


def end() -> End:
    return End()
