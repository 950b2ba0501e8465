"""Carrier for annotations the Swagger model does not know about."""

from typing import Any

from route2swagger.annotation import next_handle
from route2swagger.swagger.annotations import AbstractAnnotation


class CustomAnnotation(AbstractAnnotation):
    """Wraps a non-Swagger annotation so it survives until it is migrated.

    ``handle`` identifies the wrapped annotation; two wrappers of the same
    parsed annotation share it.
    """

    annotation: Any = None
    handle: int

    def get_annotation(self) -> Any:
        return self.annotation


def wrap(properties: dict[str, Any], annotation: Any, handle: int | None = None) -> CustomAnnotation:
    if handle is None:
        handle = next_handle()
    return CustomAnnotation(annotation=annotation, handle=handle, **properties)
