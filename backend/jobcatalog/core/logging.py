from __future__ import annotations
import logging
import sys

LOG_FORMAT = "%(asctime)s [jobcatalog] %(levelname)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single console handler to the ``jobcatalog`` logger tree."""
    root = logging.getLogger("jobcatalog")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not any(getattr(h, "_jobcatalog", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        handler._jobcatalog = True  # type: ignore[attr-defined]
        root.addHandler(handler)

    return root
