"""Auxiliary routing directives: requirements, schemes and route names."""

from typing import Any

from pydantic import BaseModel, Field

from route2swagger.routing import Bind, Modifier, RequireHttp, RequireHttps, Request, Route

REQUIREMENTS_MODIFIER = "addRequirements"


class Extras(BaseModel):
    requirements: dict[str, str] = Field(default_factory=dict)
    schemes: list[str] = Field(default_factory=list)
    bind: str | None = None
    properties: dict[str, Any] = Field(default_factory=dict)


def get_extras(root: Any) -> Extras:
    """Collect the directives nested directly in a route or request."""
    extras = Extras()
    if not isinstance(root, (Route, Request)):
        return extras

    for _, annotations in root:
        if not isinstance(annotations, list):
            continue
        for annotation in annotations:
            if isinstance(annotation, Modifier):
                if annotation.method == REQUIREMENTS_MODIFIER and annotation.args and isinstance(annotation.args[0], dict):
                    # patterns end up as strings in the document
                    extras.requirements = {str(name): str(pattern) for name, pattern in annotation.args[0].items()}
            elif isinstance(annotation, RequireHttp):
                extras.schemes.append("http")
            elif isinstance(annotation, RequireHttps):
                extras.schemes.append("https")
            elif isinstance(annotation, Bind):
                extras.bind = annotation.route_name

    return extras
