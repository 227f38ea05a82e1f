# contact_api/core/logging_config.py
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_handler: logging.Handler | None = None


def configure_logging(level: str = "INFO") -> None:
    """
    Attach one stream handler to the root logger.
    Calling it again only updates the level.
    """
    global _handler
    root = logging.getLogger()
    root.setLevel(level.upper())

    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(_handler)

    # echo=True is the way to see SQL, not the root level
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
