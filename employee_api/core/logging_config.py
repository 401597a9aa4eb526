"""Root logger setup for the API process."""

from __future__ import annotations

import logging


def setup_logging(level: str = "INFO") -> None:
    """Attach a console handler to the root logger and set its level.

    Does nothing when the root logger already has handlers, which is the
    case under pytest or when ``create_app`` runs more than once.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)
