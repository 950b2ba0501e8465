"""Processors that assemble the Swagger document from the working set."""

import logging
from typing import TYPE_CHECKING

from route2swagger.swagger.annotations import Definition, Operation, Swagger

if TYPE_CHECKING:
    from route2swagger.swagger.analysis import Analysis

logger = logging.getLogger(__name__)


def merge_into_swagger(analysis: "Analysis") -> None:
    """Pick the document root, creating an empty one when the sources declare none."""
    roots = analysis.get_annotations_of_type(Swagger)
    if not roots:
        swagger = Swagger()
        analysis.annotations.add(swagger)
    else:
        swagger = roots[0]
        for extra in roots[1:]:
            logger.warning("Multiple Swagger roots, ignoring the one in %s", extra.context)
    analysis.swagger = swagger


def merge_definitions(analysis: "Analysis") -> None:
    swagger = analysis.swagger
    for definition in analysis.get_annotations_of_type(Definition):
        if not any(known is definition for known in swagger.definitions):
            swagger.definitions.append(definition)


def build_paths(analysis: "Analysis") -> None:
    """Group operations by path, then by method."""
    swagger = analysis.swagger
    for operation in analysis.get_annotations_of_type(Operation):
        if not operation.path:
            logger.warning("Operation without a path in %s", operation.context)
            continue
        methods = swagger.paths.setdefault(operation.path, {})
        if operation.method in methods:
            logger.warning(
                "Multiple definitions for %s %s, ignoring the one in %s",
                operation.method.upper(),
                operation.path,
                operation.context,
            )
            continue
        methods[operation.method] = operation


def check_responses(analysis: "Analysis") -> None:
    for path, methods in analysis.swagger.paths.items():
        for method, operation in methods.items():
            if not operation.responses:
                logger.warning("No responses for %s %s in %s", method.upper(), path, operation.context)


DEFAULT_PROCESSORS = (merge_into_swagger, merge_definitions, build_paths, check_responses)
