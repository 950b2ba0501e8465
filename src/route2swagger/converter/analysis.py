"""Analysis that keeps routing annotations and migrates them before the Swagger processors run."""

from typing import Any, Iterable

from route2swagger.context import Context
from route2swagger.converter.converter import Converter
from route2swagger.converter.custom import wrap
from route2swagger.converter.processor import CustomAnnotations
from route2swagger.swagger.analysis import Analysis, Processor
from route2swagger.swagger.annotations import AbstractAnnotation

ROUTING_NAMESPACE = "route2swagger.routing"


class RoutingAnalysis(Analysis):
    def __init__(
        self,
        annotations: Iterable[AbstractAnnotation] = (),
        converter: Converter | None = None,
        namespaces: Iterable[str] = (),
        processors: Iterable[Processor] | None = None,
    ):
        super().__init__(annotations, processors)
        self.namespaces = (*Analysis.namespaces, ROUTING_NAMESPACE, *namespaces)
        self.converter = converter or Converter()
        self.processors.insert(0, CustomAnnotations(self.converter))

    def add_annotation(self, annotation: Any, context: Context, handle: int | None = None) -> None:
        if not isinstance(annotation, AbstractAnnotation):
            annotation = wrap({"context": context}, annotation, handle=handle)
        super().add_annotation(annotation, context, handle)
