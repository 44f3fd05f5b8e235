"""Rejections raised when a request does not match a filter."""


class Rejection(Exception):
    """Base class for all match failures."""

    status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(Rejection):
    status = 404

    def __init__(self, path: str):
        super().__init__(f"No route matches {path!r}")
        self.path = path


class MethodNotAllowed(Rejection):
    status = 405

    def __init__(self, method: str):
        super().__init__(f"Method {method} not allowed")
        self.method = method


class MissingHeader(Rejection):
    status = 400

    def __init__(self, name: str):
        super().__init__(f"Missing request header {name!r}")
        self.name = name


class MissingCookie(Rejection):
    status = 400

    def __init__(self, name: str):
        super().__init__(f"Missing request cookie {name!r}")
        self.name = name


class InvalidQuery(Rejection):
    status = 400

    def __init__(self, name: str, reason: str):
        super().__init__(f"Invalid query parameter {name!r}: {reason}")
        self.name = name


class InvalidBody(Rejection):
    status = 400


def preferred(first: Rejection, second: Rejection) -> Rejection:
    """Pick the rejection to report when both branches of an alternation fail."""
    if isinstance(second, NotFound) and not isinstance(first, NotFound):
        return first
    return second
