"""Exceptions raised by route2swagger."""


class Route2SwaggerError(Exception):
    """Base class for all route2swagger errors."""


class AnnotationError(Route2SwaggerError):
    """An annotation expression could not be evaluated."""


class ConfigError(Route2SwaggerError):
    """A configuration file is missing, unreadable or invalid."""
