"""Migration of routing annotations into Swagger operations."""

import logging
import re
from typing import Any

from route2swagger.config import ConverterOptions
from route2swagger.context import Context
from route2swagger.converter.custom import CustomAnnotation
from route2swagger.converter.extras import Extras, get_extras
from route2swagger.converter.kinds import AnnotationKind, classify
from route2swagger.routing import Controller, Request, Route
from route2swagger.swagger.annotations import OPERATIONS, AbstractAnnotation, Operation, Parameter, Response

logger = logging.getLogger(__name__)

MATCH_ALL = "match"
ALL_METHODS = ("get", "post", "put", "delete", "options", "head", "patch")
PLACEHOLDER_RE = re.compile(r"{([^}]*)}")

ControllerHandle = tuple[str | None, str | None]


def resolve_methods(specifier: str) -> list[str]:
    """Expand ``GET|POST`` style specifiers; ``MATCH`` means all methods."""
    specifier = specifier.lower()
    if specifier.strip() == MATCH_ALL:
        return list(ALL_METHODS)
    return [method.strip() for method in specifier.split("|") if method.strip()]


def merge_fragments(operation: Operation, fragments: dict[str, Any]) -> None:
    """Copy nested annotations onto the operation.

    Parameters are merged by name, the first one wins; everything else is
    overwritten.
    """
    for name, value in fragments.items():
        key = _operation_field(operation, name)
        current = getattr(operation, key, None)
        if key == "parameters" and isinstance(current, list) and isinstance(value, list):
            names = {getattr(parameter, "name", None) for parameter in current}
            for parameter in value:
                parameter_name = getattr(parameter, "name", None)
                if parameter_name in names:
                    continue
                current.append(parameter)
                names.add(parameter_name)
        else:
            setattr(operation, key, list(value) if isinstance(value, list) else value)


def _operation_field(operation: Operation, name: str) -> str:
    fields = type(operation).model_fields
    extra = operation.model_extra or {}
    for candidate in (name, f"{name}s"):
        if candidate in fields or candidate in extra:
            return candidate
        for field_name, field in fields.items():
            if field.alias == candidate:
                return field_name
    return name


class Converter:
    """Turns routing annotations into Swagger annotations.

    One converter serves one document build: it remembers which annotations
    were migrated and which classes declared a prefix.
    """

    def __init__(self, app: Any = None, options: ConverterOptions | None = None):
        self.app = app
        self.options = options or ConverterOptions()
        self.processed: set[int] = set()
        self.class_annotations: dict[Context, Controller] = {}

    def migrate_annotation(self, custom: CustomAnnotation) -> list[AbstractAnnotation]:
        """Migrate a wrapped annotation; returns the Swagger annotations replacing it."""
        if custom.handle in self.processed:
            return []
        self.processed.add(custom.handle)

        annotation = custom.get_annotation()
        context = custom.context or Context()
        controller = (context.fully_qualified_class(), context.method)

        kind = classify(annotation)
        if kind is AnnotationKind.CONTROLLER:
            self.class_annotations[context] = annotation
            return []
        if kind is AnnotationKind.ROUTE:
            return self.handle_route(annotation, context, controller)
        if kind is AnnotationKind.REQUEST:
            return self.migrate_request(annotation, context, {}, get_extras(annotation))
        if kind is AnnotationKind.NATIVE:
            return [annotation]

        logger.warning("Skipping loose annotation: %s in %s", type(annotation).__name__, context)
        return []

    def handle_route(self, route: Route, context: Context, controller: ControllerHandle) -> list[Operation]:
        route.process(self.app, controller)

        fragments: dict[str, Any] = {"parameters": []}
        for name, value in route:
            if isinstance(value, list) and value and isinstance(value[0], AbstractAnnotation):
                fragments[name] = value

        extras = get_extras(route)

        migrated: list[Operation] = []
        for request in route.request:
            migrated.extend(self.migrate_request(request, context, fragments, extras))
        return migrated

    def migrate_request(
        self,
        request: Request,
        context: Context,
        fragments: dict[str, Any] | None = None,
        extras: Extras | None = None,
    ) -> list[Operation]:
        """Build one operation per HTTP method of ``request``."""
        request_filter = self.options.request_filter
        if request_filter is not None and not request_filter(request):
            return []

        self.apply_class_annotation(context, [request])

        fragments = {"parameters": [], **(fragments or {})}
        extras = extras or Extras()

        # path parameters come after the ones declared on the route
        parameters = list(fragments["parameters"])
        for name in PLACEHOLDER_RE.findall(request.uri):
            properties: dict[str, Any] = {
                "context": context,
                "parameter": name,
                "name": name,
                "in": "path",
                "required": True,
                "type": "string",
            }
            if name in extras.requirements:
                properties["pattern"] = extras.requirements[name]
            parameters.append(Parameter(**properties))
        fragments["parameters"] = parameters

        if extras.schemes:
            fragments["schemes"] = list(extras.schemes)

        migrated: list[Operation] = []
        for method in resolve_methods(request.method):
            operation_class = OPERATIONS.get(method)
            if operation_class is None:
                logger.warning("Unsupported HTTP method %r in %s", method, context)
                continue

            path = "/" + request.uri
            properties = {
                "context": context,
                "operationId": extras.bind or context.method,
                "method": method,
                "path": path,
            }
            properties.update(extras.properties)
            if self.options.extra_callback is not None:
                properties.update(self.options.extra_callback(context, method, path))
            operation = operation_class(**properties)

            default_text = f"{method.upper()}:{operation.path}"
            if operation.description is None and self.options.auto_description:
                operation.description = default_text
            if operation.summary is None and self.options.auto_summary:
                operation.summary = operation.description or default_text

            merge_fragments(operation, fragments)

            if not operation.responses and self.options.auto_response:
                operation.responses = [Response(context=context, response="default", description=default_text)]

            migrated.append(operation)

        return migrated

    def apply_class_annotation(self, context: Context, requests: list[Request]) -> Controller | None:
        """Prefix the uri of ``requests`` with the prefix registered for the context's class."""
        class_name = context.fully_qualified_class()
        if class_name is None:
            return None

        for class_context, class_annotation in self.class_annotations.items():
            if class_context.fully_qualified_class() != class_name:
                continue
            for request in requests:
                request.uri = f"{class_annotation.prefix}/{request.uri}"
                # keep relative
                if request.uri.startswith("/"):
                    request.uri = request.uri[1:]
            return class_annotation

        return None
