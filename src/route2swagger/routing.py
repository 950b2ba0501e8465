"""Routing annotations.

These describe how controllers are mounted::

    from route2swagger import routing as slx

    @slx.Controller(prefix="/users")
    class UserController:
        @slx.Route(
            slx.Request(method="GET", uri="{id}"),
            slx.Modifier(method="addRequirements", args=[{"id": "[0-9]+"}]),
        )
        def show(self, id): ...
"""

from typing import Any

from pydantic import Field

from route2swagger.annotation import Annotation


class RoutingAnnotation(Annotation):
    """Base class for annotations that are not native Swagger annotations."""


class Controller(RoutingAnnotation):
    """Class level annotation; ``prefix`` is prepended to every request uri."""

    nest_key = "controller"

    prefix: str = ""


class Request(RoutingAnnotation):
    """HTTP method(s) and uri template of a single endpoint.

    ``method`` may be a single method, a ``|`` separated list such as
    ``GET|POST`` or ``MATCH`` for all methods.
    """

    nest_key = "request"

    method: str = "GET"
    uri: str = ""


class Route(RoutingAnnotation):
    """Groups one or more requests with nested Swagger annotations."""

    nest_key = "route"

    request: list[Request] = Field(default_factory=list)

    def process(self, app: Any, controller: tuple[str | None, str | None]) -> None:
        """Register this route's requests on ``app``; a no-op without one."""
        if app is None:
            return
        for request in self.request:
            app.add_route(request.method, request.uri, controller)


class Modifier(RoutingAnnotation):
    """Calls ``method`` with ``args`` on the route, e.g. ``addRequirements``."""

    nest_key = "modifier"

    method: str
    args: list[Any] = Field(default_factory=list)


class RequireHttp(RoutingAnnotation):
    nest_key = "require_http"


class RequireHttps(RoutingAnnotation):
    nest_key = "require_https"


class Bind(RoutingAnnotation):
    """Names the route; the name doubles as the operation id."""

    nest_key = "bind"

    route_name: str
