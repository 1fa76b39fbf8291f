# src/dropfour/log.py

from __future__ import annotations
import logging
from typing import Optional, Union

from dropfour.config import LOG_FORMAT, LOG_LEVEL

_configured = False


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    """
    Configure root logging for an entry point.
    Library modules only call logging.getLogger(__name__).
    """
    global _configured
    lvl = level if level is not None else LOG_LEVEL
    if isinstance(lvl, str):
        lvl = logging.getLevelName(lvl.upper())
        if not isinstance(lvl, int):
            lvl = logging.WARNING

    if not _configured:
        logging.basicConfig(format=LOG_FORMAT)
        _configured = True
    logging.getLogger().setLevel(lvl)
