"""Query string filters."""

from filter_docs.document import route as doc
from filter_docs.document.route import RouteDocumentation
from filter_docs.document.types import TypeDescription, type_for
from filter_docs.filters.base import Filter, MatchState, convert
from filter_docs.filters.reject import InvalidQuery


class Query(Filter):
    """Extract one query field converted to `python_type`.

    Optional fields extract None when absent.
    """

    def __init__(
        self,
        name: str,
        python_type: type = str,
        required: bool = True,
        description: str | None = None,
        parameter_type: TypeDescription | None = None,
    ):
        self.name = name
        self.python_type = python_type
        self.required = required
        self.description = description
        self.parameter_type = parameter_type

    def extract(self, state: MatchState) -> tuple[tuple, MatchState]:
        raw = state.request.query.get(self.name)
        if raw is None:
            if self.required:
                raise InvalidQuery(self.name, "missing")
            return (None,), state
        try:
            value = convert(raw, self.python_type)
        except ValueError as e:
            raise InvalidQuery(self.name, str(e)) from e
        return (value,), state

    def describe(self, route: RouteDocumentation) -> list[RouteDocumentation]:
        parameter_type = self.parameter_type
        if parameter_type is None:
            parameter_type = type_for(self.python_type)
        documented = doc.query(
            self.name,
            parameter_type,
            required=self.required,
            description=self.description,
        )
        return [route.with_query(documented)]


def query(
    name: str,
    python_type: type = str,
    required: bool = True,
    description: str | None = None,
    parameter_type: TypeDescription | None = None,
) -> Query:
    return Query(name, python_type, required, description, parameter_type)
