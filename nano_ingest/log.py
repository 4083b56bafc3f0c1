"""Coloured console logging for the command-line front end."""
import logging
import sys

_RESET = '\033[0m'
_SUCCESS = '\033[32m'
_COLORS = {
    logging.DEBUG:    '\033[2m',
    logging.INFO:     '\033[1m',
    logging.WARNING:  '\033[33m',
    logging.ERROR:    '\033[1;31m',
    logging.CRITICAL: '\033[1;31m',
}


class ColorFormatter(logging.Formatter):
    """Wraps each formatted record in an ANSI colour picked from its level.

    Records logged with ``extra={'success': True}`` are rendered green.
    """

    def __init__(self, fmt: str = '%(message)s', use_color: bool = True):
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if not self.use_color:
            return message
        if getattr(record, 'success', False):
            color = _SUCCESS
        else:
            color = _COLORS.get(record.levelno, '')
        return f'{color}{message}{_RESET}'


def console_logger(
    name: str = 'nano_ingest.cli',
    silent: bool = False,
    verbose: int = 0,
    color: bool = True,
    stream=None,
) -> logging.Logger:
    """Return a logger writing to *stream* (stderr by default).

    The logger does not propagate, so its level is independent of the root
    logging configuration. ``silent`` mutes every level; ``verbose >= 1``
    enables DEBUG.
    """
    stream = stream if stream is not None else sys.stderr
    use_color = color and hasattr(stream, 'isatty') and stream.isatty()

    handler = logging.StreamHandler(stream)
    handler.setFormatter(ColorFormatter(use_color=use_color))

    logger = logging.getLogger(name)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False
    if silent:
        logger.setLevel(logging.CRITICAL + 1)
    elif verbose:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)
    return logger


def success(logger: logging.Logger, msg: str, *args) -> None:
    logger.info(msg, *args, extra={'success': True})
