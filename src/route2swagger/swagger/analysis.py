"""Working set of annotations and the processor pipeline that turns it into a document."""

import logging
from typing import Any, Callable, Iterable, Iterator, TypeVar

from route2swagger.context import Context
from route2swagger.swagger.annotations import AbstractAnnotation, Swagger
from route2swagger.swagger.processors import DEFAULT_PROCESSORS

logger = logging.getLogger(__name__)

SWAGGER_NAMESPACE = "route2swagger.swagger.annotations"

T = TypeVar("T", bound=AbstractAnnotation)


class AnnotationSet:
    """Ordered container of annotations keyed by object identity."""

    def __init__(self, annotations: Iterable[AbstractAnnotation] = ()):
        self._items: dict[int, AbstractAnnotation] = {}
        self.add_all(annotations)

    def add(self, annotation: AbstractAnnotation) -> None:
        self._items.setdefault(id(annotation), annotation)

    def remove(self, annotation: AbstractAnnotation) -> None:
        self._items.pop(id(annotation), None)

    def add_all(self, annotations: Iterable[AbstractAnnotation]) -> None:
        for annotation in annotations:
            self.add(annotation)

    def remove_all(self, annotations: Iterable[AbstractAnnotation]) -> None:
        for annotation in annotations:
            self.remove(annotation)

    def __iter__(self) -> Iterator[AbstractAnnotation]:
        return iter(list(self._items.values()))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, annotation: object) -> bool:
        return self._items.get(id(annotation)) is annotation


Processor = Callable[["Analysis"], Any]


class Analysis:
    """Collects annotations found by the scanner and runs the processors over them."""

    namespaces: tuple[str, ...] = (SWAGGER_NAMESPACE,)

    def __init__(self, annotations: Iterable[AbstractAnnotation] = (), processors: Iterable[Processor] | None = None):
        self.annotations = AnnotationSet(annotations)
        self.processors: list[Processor] = list(processors if processors is not None else DEFAULT_PROCESSORS)
        self.swagger: Swagger | None = None

    def add_annotation(self, annotation: Any, context: Context, handle: int | None = None) -> None:
        """Add a top level annotation found at ``context``."""
        if not isinstance(annotation, AbstractAnnotation):
            logger.warning("Unexpected annotation %s in %s", type(annotation).__name__, context)
            return
        if annotation.context is None:
            annotation.context = context
        self.annotations.add(annotation)

    def get_annotations_of_type(self, cls: type[T]) -> list[T]:
        return [annotation for annotation in self.annotations if isinstance(annotation, cls)]

    def process(self) -> Swagger:
        for processor in self.processors:
            processor(self)
        if self.swagger is None:
            self.swagger = Swagger()
        return self.swagger
