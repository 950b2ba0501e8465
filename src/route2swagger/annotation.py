"""Common base for routing and Swagger annotations.

Annotations are pydantic models with dynamic properties. Positional arguments
are nested annotations: each one is stored under the ``nest_key`` of its class,
so ``Route(Request(...), Response(...))`` ends up with ``request`` and
``responses`` lists.
"""

import itertools
import types
from typing import Any, ClassVar, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def _field_name(cls: type[BaseModel], key: str) -> str | None:
    """Return the field declared as ``key`` either by name or by alias."""
    if key in cls.model_fields:
        return key
    for name, field in cls.model_fields.items():
        if field.alias == key:
            return name
    return None


_handles = itertools.count(1)


def next_handle() -> int:
    """Return a handle no other annotation of this process has."""
    return next(_handles)


def _nest_key(item: Any) -> str:
    return getattr(type(item), "nest_key", None) or "value"


def _is_list(annotation: Any) -> bool:
    if get_origin(annotation) in (Union, types.UnionType):
        return any(_is_list(arg) for arg in get_args(annotation) if arg is not type(None))
    return annotation is list or get_origin(annotation) is list


class Annotation(BaseModel):
    """An annotation with nested children and arbitrary extra properties."""

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        alias_generator=to_camel,
        arbitrary_types_allowed=True,
    )

    nest_key: ClassVar[str | None] = None

    def __init__(self, *nested: Any, **data: Any) -> None:
        for item in nested:
            key = _nest_key(item)
            name = _field_name(type(self), key)
            if name is not None and not _is_list(type(self).model_fields[name].annotation):
                # single-valued field, last one wins
                data[key] = item
            else:
                data[key] = [*data.get(key, []), item]
        super().__init__(**data)

    def __call__(self, target: Any) -> Any:
        """Allow annotations to be used as no-op decorators."""
        return target
