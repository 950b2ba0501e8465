"""Route log records of the package to the console."""

import logging

import click

LOGGER_NAME = "route2swagger"


class ClickHandler(logging.Handler):
    """Echo records to stderr as ``notice: ...`` or ``warning: ...``."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = "notice" if record.levelno <= logging.INFO else "warning"
            click.echo(f"{level}: {self.format(record)}", err=True)
        except Exception:
            self.handleError(record)


def configure_logging(verbose: bool) -> logging.Logger:
    """Attach a console handler when ``verbose``, only a NullHandler otherwise."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    if verbose:
        logger.addHandler(ClickHandler())
        logger.setLevel(logging.INFO)
    else:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.WARNING)
    return logger
