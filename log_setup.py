import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_installed = None


def configure_logging(level="WARNING", path=None):
    """Send log records to ``path``; curses owns the terminal while we run."""
    global _installed
    root = logging.getLogger()
    if _installed is not None:
        root.removeHandler(_installed)
        _installed.close()

    handler = None
    if path:
        try:
            handler = logging.FileHandler(path, encoding="utf-8")
        except OSError:
            handler = None
    if handler is None:
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root.addHandler(handler)
    root.setLevel(getattr(logging, str(level).upper(), logging.WARNING))
    _installed = handler
    return handler
