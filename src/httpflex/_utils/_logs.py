import logging
import sys
from typing import Optional

from .constants import LOGGER_NAME

logger: logging.Logger = logging.getLogger(LOGGER_NAME)


class _StderrHandler(logging.StreamHandler):
    """Stream handler that always writes to the current ``sys.stderr``."""

    @property  # type: ignore[override]
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        pass


_handler: Optional[logging.Handler] = None


def setup_logging(should_debug: Optional[bool] = None) -> None:
    global _handler

    if _handler is None:
        _handler = _StderrHandler()
        _handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(_handler)

    logger.setLevel(logging.DEBUG if should_debug else logging.INFO)
