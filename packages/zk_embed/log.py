# packages/zk_embed/log.py
import logging
import sys
from pythonjsonlogger import jsonlogger

from . import config
from .errors import ConfigError

logger = logging.getLogger("zk_embed")
_handler: logging.Handler | None = None


def setup_logging(level: str | None = None) -> logging.Logger:
    """Route the package logger to the current stderr as JSON lines."""
    global _handler
    level = (level or config.LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"ZK_EMBED_LOG_LEVEL: unknown log level {level!r}")
    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(jsonlogger.JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(_handler)
    logger.setLevel(level)
    return logger
