"""Logging helpers for dmp-diff entry points.

Every module logs through the package-wide ``logger`` defined here; the
library never installs handlers itself.
"""

from __future__ import annotations

import logging

__all__ = ["init_logging", "logger", "set_log_level"]

logger = logging.getLogger("dmp_diff")


def init_logging(level: int | None = logging.INFO) -> None:
    """Set up logging for an application embedding dmp-diff.

    Installs a basic root handler and sets the level of every ``dmp_diff``
    logger to ``level``, unless ``level`` is None.
    """
    fmt = "[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s"
    logging.basicConfig(format=fmt)
    logging.captureWarnings(True)
    if level is not None:
        set_log_level(level)


def set_log_level(level: int, set_root: bool = False) -> None:
    """Set the level of the ``dmp_diff`` logger (and optionally the root logger)."""
    logger.setLevel(level)
    if set_root:
        logging.getLogger().setLevel(level)
