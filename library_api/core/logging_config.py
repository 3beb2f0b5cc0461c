import logging


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def configure_logging(level: str = "INFO"):
    """Install a single stream handler on the root logger.

    Calling it again only updates the level.
    """
    global _handler
    root = logging.getLogger()
    root.setLevel(level)
    if _handler is None or _handler not in root.handlers:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(_handler)
    return _handler
