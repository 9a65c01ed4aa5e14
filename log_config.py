import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler = None


def configure_logging(cfg):
    """Route logs to the configured file; curses owns the terminal otherwise."""
    global _handler
    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
        _handler.close()
        _handler = None

    log_file = cfg.get("LOG_FILE")
    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.NullHandler()
    root.addHandler(handler)
    root.setLevel(getattr(logging, cfg.get("LOG_LEVEL", "WARNING"), logging.WARNING))
    _handler = handler
    return handler
