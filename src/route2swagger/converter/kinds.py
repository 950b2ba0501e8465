"""Classification of the annotations handed to the converter."""

from enum import Enum
from typing import Any

from route2swagger.routing import Controller, Request, Route
from route2swagger.swagger.annotations import AbstractAnnotation


class AnnotationKind(Enum):
    CONTROLLER = "controller"
    ROUTE = "route"
    REQUEST = "request"
    NATIVE = "native"
    UNKNOWN = "unknown"


def classify(annotation: Any) -> AnnotationKind:
    if isinstance(annotation, Controller):
        return AnnotationKind.CONTROLLER
    if isinstance(annotation, Route):
        return AnnotationKind.ROUTE
    if isinstance(annotation, Request):
        return AnnotationKind.REQUEST
    if isinstance(annotation, AbstractAnnotation):
        return AnnotationKind.NATIVE
    return AnnotationKind.UNKNOWN
