# src/common/utils/logger.py
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "info") -> None:
    """Install one stream handler on the root logger at the given level."""
    root = logging.getLogger()
    root.setLevel(level.upper())
    if not any(getattr(h, "_sonwi", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._sonwi = True
        root.addHandler(handler)
