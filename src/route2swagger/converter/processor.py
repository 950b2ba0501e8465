"""Processor replacing wrapped annotations with their Swagger counterparts."""

from typing import TYPE_CHECKING

from route2swagger.converter.converter import Converter
from route2swagger.converter.custom import CustomAnnotation
from route2swagger.converter.kinds import AnnotationKind, classify
from route2swagger.swagger.annotations import AbstractAnnotation

if TYPE_CHECKING:
    from route2swagger.swagger.analysis import Analysis


class CustomAnnotations:
    """Migrate every ``CustomAnnotation`` of the analysis.

    Controllers are registered before anything else so that their prefix
    applies no matter where the scanner found them.
    """

    def __init__(self, converter: Converter):
        self.converter = converter

    def __call__(self, analysis: "Analysis") -> None:
        wrapped = [annotation for annotation in analysis.annotations if isinstance(annotation, CustomAnnotation)]
        wrapped.sort(key=lambda custom: classify(custom.get_annotation()) is not AnnotationKind.CONTROLLER)

        add: list[AbstractAnnotation] = []
        for custom in wrapped:
            add.extend(self.converter.migrate_annotation(custom))

        analysis.annotations.remove_all(wrapped)
        analysis.annotations.add_all(add)
