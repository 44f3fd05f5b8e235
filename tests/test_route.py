from filter_docs.document.route import (
    Method,
    RouteDocumentation,
    body,
    cookie,
    header,
    query,
    response,
)
from filter_docs.document.types import integer, object_, string


class TestRouteDocumentation:
    def test_empty_record(self):
        route = RouteDocumentation()
        assert route.method is None
        assert route.path == ""
        assert route.parameters == ()
        assert route.responses == {}

    def test_segments_append_with_separator(self):
        route = RouteDocumentation().with_segment("users").with_segment("active")
        assert route.path == "/users/active"

    def test_parameters_get_positional_placeholders(self):
        route = (
            RouteDocumentation()
            .with_segment("orgs")
            .with_parameter("org", string())
            .with_segment("repos")
            .with_parameter("repo_id", integer(), "Repository id")
        )
        assert route.path == "/orgs/{0}/repos/{1}"
        assert [p.name for p in route.parameters] == ["org", "repo_id"]
        assert route.parameters[1].description == "Repository id"

    def test_with_methods_never_mutate(self):
        base = RouteDocumentation().with_segment("a")
        branch = base.with_header(header("X-Token")).with_response(200, response("OK"))
        assert base.headers == ()
        assert base.responses == {}
        assert branch.path == "/a"
        assert 200 in branch.responses

    def test_method_and_collections(self):
        route = (
            RouteDocumentation()
            .with_method(Method.GET)
            .with_cookie(cookie("session"))
            .with_query(query("limit", integer(), required=False))
            .with_body(body(object_(), mime="application/json"))
        )
        assert route.method == Method.GET
        assert route.cookies[0].required is True
        assert route.queries[0].required is False
        assert route.body[0].mime == "application/json"

    def test_later_response_replaces_same_status(self):
        route = (
            RouteDocumentation()
            .with_response(400, response("Bad Request"))
            .with_response(400, response("Invalid input"))
        )
        assert route.responses[400].description == "Invalid input"


class TestBuilders:
    def test_query_defaults_to_string(self):
        assert query("q").parameter_type == string()

    def test_response_without_body(self):
        r = response("Not Found")
        assert r.body == ()
        assert r.headers == ()

    def test_response_with_body_and_header(self):
        r = response("OK", object_({"id": integer()}), "application/json").with_header(
            header("X-Rate-Limit").described("Requests left")
        )
        assert r.body[0].mime == "application/json"
        assert r.headers[0].description == "Requests left"
