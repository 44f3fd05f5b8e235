"""Filter base class, request model and the sequencing/alternation combinators.

Every filter has two independent capabilities:

- ``extract(state)`` matches a request and returns the extracted values;
- ``describe(route)`` returns the documented routes this filter produces from
  a partially filled RouteDocumentation, without looking at any request.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from http.cookies import CookieError, SimpleCookie
from urllib.parse import parse_qs, urlsplit

from pydantic import BaseModel

from filter_docs.document.route import Method, RouteDocumentation
from filter_docs.filters.reject import Rejection, preferred


class Request(BaseModel):
    """An incoming request, reduced to what filters look at."""

    method: Method
    target: str  # /users/1?verbose=true
    headers: dict[str, str] = {}
    body: str | bytes | None = None

    @property
    def path(self) -> str:
        return urlsplit(self.target).path

    @property
    def query(self) -> dict[str, str]:
        parsed = parse_qs(urlsplit(self.target).query, keep_blank_values=True)
        return {name: values[0] for name, values in parsed.items()}

    def header(self, name: str) -> str | None:
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return None

    @property
    def cookies(self) -> dict[str, str]:
        raw = self.header("cookie")
        if not raw:
            return {}
        jar = SimpleCookie()
        try:
            jar.load(raw)
        except CookieError:
            return {}
        return {name: morsel.value for name, morsel in jar.items()}


@dataclass(frozen=True)
class MatchState:
    """A request plus the path segments not yet consumed."""

    request: Request
    segments: tuple[str, ...]

    @classmethod
    def start(cls, request: Request) -> "MatchState":
        return cls(request, tuple(s for s in request.path.split("/") if s))

    def advance(self) -> "MatchState":
        return MatchState(self.request, self.segments[1:])


class Filter(ABC):
    """A composable request matcher that can also document itself."""

    @abstractmethod
    def extract(self, state: MatchState) -> tuple[tuple, MatchState]:
        """Match `state`, returning extracted values and the remaining state.

        Raises a Rejection when the request does not match.
        """

    def describe(self, route: RouteDocumentation) -> list[RouteDocumentation]:
        # Filters that know nothing about their route leave it untouched.
        return [route]

    def match(self, request: Request) -> tuple:
        extracted, _ = self.extract(MatchState.start(request))
        return extracted

    def __and__(self, other: "Filter") -> "And":
        return And(self, other)

    def __or__(self, other: "Filter") -> "Or":
        return Or(self, other)


class And(Filter):
    """Match `first`, then `second` against what is left."""

    def __init__(self, first: Filter, second: Filter):
        self.first = first
        self.second = second

    def extract(self, state: MatchState) -> tuple[tuple, MatchState]:
        first_values, state = self.first.extract(state)
        second_values, state = self.second.extract(state)
        return first_values + second_values, state

    def describe(self, route: RouteDocumentation) -> list[RouteDocumentation]:
        return [
            described
            for partial in self.first.describe(route)
            for described in self.second.describe(partial)
        ]


class Or(Filter):
    """Match `first`, falling back to `second` when it rejects."""

    def __init__(self, first: Filter, second: Filter):
        self.first = first
        self.second = second

    def extract(self, state: MatchState) -> tuple[tuple, MatchState]:
        try:
            return self.first.extract(state)
        except Rejection as first_error:
            try:
                return self.second.extract(state)
            except Rejection as second_error:
                raise preferred(first_error, second_error) from None

    def describe(self, route: RouteDocumentation) -> list[RouteDocumentation]:
        return self.first.describe(route) + self.second.describe(route)


def convert(raw: str, python_type: type):
    """Convert a raw path or query value, raising ValueError on bad input."""
    if python_type is bool:
        lowered = raw.lower()
        if lowered in ("true", "1"):
            return True
        if lowered in ("false", "0"):
            return False
        raise ValueError(f"{raw!r} is not a boolean")
    return python_type(raw)
