"""Collect route documentation from a filter tree."""

import logging

from filter_docs.document.route import RouteDocumentation
from filter_docs.filters.base import Filter

logger = logging.getLogger(__name__)


def describe(root: Filter) -> list[RouteDocumentation]:
    """Return one RouteDocumentation per concrete route `root` can match.

    Routes that contributed no path segments are documented at "/".
    """
    routes = [
        route if route.path else route.model_copy(update={"path": "/"})
        for route in root.describe(RouteDocumentation())
    ]
    logger.debug("Documented %d route(s)", len(routes))
    return routes
