"""Route documentation records.

All filters accumulate into RouteDocumentation. Records are frozen: every
`with_*` call returns a new record, so alternative branches built from the
same partial record never see each other's contributions.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from .types import TypeDescription, object_, string


class Method(str, Enum):
    """HTTP methods with an operation slot in an OpenAPI path item."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    PATCH = "PATCH"
    TRACE = "TRACE"


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class DocumentedHeader(_Record):
    name: str
    description: str | None = None
    required: bool = True

    def described(self, description: str) -> "DocumentedHeader":
        return self.model_copy(update={"description": description})


class DocumentedCookie(_Record):
    name: str
    description: str | None = None
    required: bool = True

    def described(self, description: str) -> "DocumentedCookie":
        return self.model_copy(update={"description": description})


class DocumentedParameter(_Record):
    """A positional path parameter."""

    name: str
    description: str | None = None
    parameter_type: TypeDescription


class DocumentedQuery(_Record):
    name: str
    description: str | None = None
    parameter_type: TypeDescription
    required: bool = True

    def described(self, description: str) -> "DocumentedQuery":
        return self.model_copy(update={"description": description})


class DocumentedBody(_Record):
    """A body shape for one mime type (None means any)."""

    body: TypeDescription = object_()
    mime: str | None = None
    required: bool = True


class DocumentedResponse(_Record):
    description: str = ""
    headers: tuple[DocumentedHeader, ...] = ()
    body: tuple[DocumentedBody, ...] = ()

    def described(self, description: str) -> "DocumentedResponse":
        return self.model_copy(update={"description": description})

    def with_header(self, header: DocumentedHeader) -> "DocumentedResponse":
        return self.model_copy(update={"headers": self.headers + (header,)})

    def with_body(self, body: DocumentedBody) -> "DocumentedResponse":
        return self.model_copy(update={"body": self.body + (body,)})


class RouteDocumentation(_Record):
    """Everything known about one route so far."""

    method: Method | None = None
    path: str = ""
    parameters: tuple[DocumentedParameter, ...] = ()
    headers: tuple[DocumentedHeader, ...] = ()
    cookies: tuple[DocumentedCookie, ...] = ()
    queries: tuple[DocumentedQuery, ...] = ()
    body: tuple[DocumentedBody, ...] = ()
    responses: dict[int, DocumentedResponse] = {}

    def with_method(self, method: Method) -> "RouteDocumentation":
        return self.model_copy(update={"method": method})

    def with_segment(self, segment: str) -> "RouteDocumentation":
        return self.model_copy(update={"path": f"{self.path}/{segment}"})

    def with_parameter(
        self,
        name: str,
        parameter_type: TypeDescription,
        description: str | None = None,
    ) -> "RouteDocumentation":
        """Append a `{index}` placeholder and its parameter entry."""
        parameter = DocumentedParameter(
            name=name, description=description, parameter_type=parameter_type
        )
        return self.model_copy(
            update={
                "path": f"{self.path}/{{{len(self.parameters)}}}",
                "parameters": self.parameters + (parameter,),
            }
        )

    def with_header(self, header: DocumentedHeader) -> "RouteDocumentation":
        return self.model_copy(update={"headers": self.headers + (header,)})

    def with_cookie(self, cookie: DocumentedCookie) -> "RouteDocumentation":
        return self.model_copy(update={"cookies": self.cookies + (cookie,)})

    def with_query(self, query: DocumentedQuery) -> "RouteDocumentation":
        return self.model_copy(update={"queries": self.queries + (query,)})

    def with_body(self, body: DocumentedBody) -> "RouteDocumentation":
        return self.model_copy(update={"body": self.body + (body,)})

    def with_response(self, status: int, response: DocumentedResponse) -> "RouteDocumentation":
        return self.model_copy(update={"responses": {**self.responses, status: response}})


# Builders for explicit documentation callbacks.


def header(name: str, required: bool = True, description: str | None = None) -> DocumentedHeader:
    return DocumentedHeader(name=name, required=required, description=description)


def cookie(name: str, required: bool = True, description: str | None = None) -> DocumentedCookie:
    return DocumentedCookie(name=name, required=required, description=description)


def query(
    name: str,
    parameter_type: TypeDescription | None = None,
    required: bool = True,
    description: str | None = None,
) -> DocumentedQuery:
    return DocumentedQuery(
        name=name,
        parameter_type=parameter_type if parameter_type is not None else string(),
        required=required,
        description=description,
    )


def body(
    body_type: TypeDescription | None = None,
    mime: str | None = None,
    required: bool = True,
) -> DocumentedBody:
    return DocumentedBody(
        body=body_type if body_type is not None else object_(),
        mime=mime,
        required=required,
    )


def response(description: str = "", body_type: TypeDescription | None = None, mime: str | None = None) -> DocumentedResponse:
    """Build a response, with a single body when `body_type` is given."""
    bodies = (DocumentedBody(body=body_type, mime=mime),) if body_type is not None else ()
    return DocumentedResponse(description=description, body=bodies)
