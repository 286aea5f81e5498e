import logging
import os
import sys
from enum import Enum


class LogContext(str, Enum):
    VALIDATE = "Validate"
    CANDIDATES = "Candidates"
    GENERATE = "Generate"
    OVERWRITE = "Overwrite"
    RANDOM_SOURCE = "Random Source"
    ENCODING = "Encoding"
    CLIPBOARD = "Clipboard"
    CLI = "CLI"


CTX = LogContext

LOG_LEVEL_ENV = "MKPW_LOG_LEVEL"


# ============================================================
# Logging configuration
# ============================================================
_formatter = logging.Formatter(
    "%(asctime)s | %(levelname)s | %(context)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

_logger = logging.getLogger("mkpw")
if not _logger.handlers:
    # Library default: stay silent until the application opts in.
    _logger.addHandler(logging.NullHandler())
    _env_level = os.environ.get(LOG_LEVEL_ENV)
    if _env_level:
        _logger.setLevel(getattr(logging, _env_level.upper(), logging.WARNING))


def configure(level: int = logging.INFO, stream=None) -> logging.Handler:
    """Attach a stderr handler to the package logger (used by the CLI)."""
    for handler in list(_logger.handlers):
        if getattr(handler, "_mkpw_console", False):
            _logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(_formatter)
    handler._mkpw_console = True
    _logger.addHandler(handler)
    _logger.setLevel(level)
    _logger.propagate = False
    return handler


# ============================================================
# Logger adapter
# ============================================================
class _ContextLoggerAdapter(logging.LoggerAdapter):
    """
    Stamps every record with the phase it was emitted from.
    """

    def process(self, msg, kwargs):
        extra = kwargs.setdefault("extra", {})
        if "context" not in extra:
            extra["context"] = self.extra["context"]
        return msg, kwargs


def get_logger(context) -> logging.LoggerAdapter:
    """Return a logger bound to the given context."""
    context_value = context.value if isinstance(context, LogContext) else str(context)
    return _ContextLoggerAdapter(_logger, {"context": context_value})


def notify_user(message: str) -> None:
    """
    Print a message meant for the person running the command.
    """
    print(message, file=sys.stderr)
