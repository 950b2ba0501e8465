"""Swagger 2.0 annotation object model.

Usage in source files::

    from route2swagger.swagger import annotations as swg

    swg.Swagger(swg.Info(title="Example", version="1.0.0"), base_path="/")
"""

from typing import Any, ClassVar

from pydantic import Field, field_validator

from route2swagger.annotation import Annotation
from route2swagger.context import Context


def _export(value: Any) -> Any:
    if isinstance(value, AbstractAnnotation):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_export(item) for item in value]
    if isinstance(value, dict):
        return {key: _export(item) for key, item in value.items()}
    return value


class AbstractAnnotation(Annotation):
    """Base class of all native Swagger annotations."""

    # properties that never end up in the document
    internal: ClassVar[frozenset[str]] = frozenset({"context"})
    # list properties exported as a mapping keyed by the given item property
    keyed: ClassVar[dict[str, str]] = {}

    context: Context | None = None

    def to_dict(self) -> dict[str, Any]:
        fields = type(self).model_fields
        data: dict[str, Any] = {}
        for name, value in self:
            if name in self.internal or value is None or value == []:
                continue
            key = (fields[name].alias or name) if name in fields else name
            if name in self.keyed and isinstance(value, list):
                data[key] = {str(getattr(item, self.keyed[name])): _export(item) for item in value}
            else:
                data[key] = _export(value)
        return data


class Info(AbstractAnnotation):
    nest_key = "info"

    title: str | None = None
    version: str | None = None
    description: str | None = None


class Tag(AbstractAnnotation):
    nest_key = "tags"

    name: str | None = None
    description: str | None = None


class Schema(AbstractAnnotation):
    nest_key = "schema"

    ref: str | None = Field(default=None, alias="$ref")
    type: str | None = None
    items: Any = None


class Property(AbstractAnnotation):
    nest_key = "properties"
    internal = frozenset({"context", "property"})

    property: str | None = None
    type: str | None = None
    format: str | None = None
    description: str | None = None


class Definition(AbstractAnnotation):
    nest_key = "definitions"
    internal = frozenset({"context", "definition"})
    keyed = {"properties": "property"}

    definition: str | None = None
    type: str | None = None
    required: list[str] | None = None
    properties: list[Property] = Field(default_factory=list)


class Parameter(AbstractAnnotation):
    nest_key = "parameters"
    internal = frozenset({"context", "parameter"})

    parameter: str | None = None
    name: str | None = None
    in_: str | None = Field(default=None, alias="in")
    required: bool | None = None
    type: str | None = None
    format: str | None = None
    pattern: str | None = None
    description: str | None = None


class Response(AbstractAnnotation):
    nest_key = "responses"
    internal = frozenset({"context", "response"})

    response: str | int | None = None
    description: str | None = None
    schema_: Schema | None = Field(default=None, alias="schema")


class Operation(AbstractAnnotation):
    """One (path, method) pair of the document."""

    internal = frozenset({"context", "method", "path"})
    keyed = {"responses": "response"}

    method: str
    path: str | None = None
    operation_id: str | None = None
    summary: str | None = None
    description: str | None = None
    tags: list[str] | None = None
    schemes: list[str] | None = None
    consumes: list[str] | None = None
    produces: list[str] | None = None
    parameters: list[Parameter] = Field(default_factory=list)
    responses: list[Response] = Field(default_factory=list)
    deprecated: bool | None = None
    security: list[dict[str, Any]] | None = None

    @field_validator("tags", mode="before")
    @classmethod
    def _tag_names(cls, value: Any) -> Any:
        # operations reference tags by name
        if isinstance(value, list):
            return [item.name if isinstance(item, Tag) else item for item in value]
        return value


class Get(Operation):
    method: str = "get"


class Post(Operation):
    method: str = "post"


class Put(Operation):
    method: str = "put"


class Delete(Operation):
    method: str = "delete"


class Options(Operation):
    method: str = "options"


class Head(Operation):
    method: str = "head"


class Patch(Operation):
    method: str = "patch"


OPERATIONS: dict[str, type[Operation]] = {
    cls.model_fields["method"].default: cls for cls in (Get, Post, Put, Delete, Options, Head, Patch)
}


class Swagger(AbstractAnnotation):
    """Root of the document."""

    nest_key = "swagger"
    keyed = {"definitions": "definition"}

    swagger: str = "2.0"
    info: Info | None = None
    host: str | None = None
    base_path: str | None = None
    schemes: list[str] | None = None
    consumes: list[str] | None = None
    produces: list[str] | None = None
    paths: dict[str, dict[str, Operation]] = Field(default_factory=dict)
    definitions: list[Definition] = Field(default_factory=list)
    tags: list[Tag] = Field(default_factory=list)
