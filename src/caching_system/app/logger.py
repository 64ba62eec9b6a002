from __future__ import annotations

import logging

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class _CacheLogHandler(logging.StreamHandler):
    pass


def configure_logging(level: str | int | None = None) -> None:
    """
    Installs one stream handler on the root logger. Safe to call repeatedly.

    Meant for application entry points; the library itself never calls it.
    """
    root = logging.getLogger()
    if level is not None:
        root.setLevel(level)
    if any(isinstance(h, _CacheLogHandler) for h in root.handlers):
        return

    handler = _CacheLogHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)
