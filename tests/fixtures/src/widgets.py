import functools

from route2swagger.routing import Bind, Modifier, Request, Route
from route2swagger.swagger.annotations import Parameter, Response


@Route(
    Request(method="GET|POST", uri="widgets/{id}"),
    Modifier(method="addRequirements", args=[{"id": "[0-9]+"}]),
    Bind(route_name="widget"),
    Parameter(name="id", in_="path", required=True, type="string", description="Widget id"),
    Response(response=200, description="A widget"),
)
def widget(id):
    return id


@functools.lru_cache()
@Request(method="DELETE", uri="widgets")
def purge():
    return None
