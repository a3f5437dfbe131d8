"""Root logging setup from LOG_LEVEL / LOG_FILE."""
from __future__ import annotations

import logging
import os
from typing import Optional

from dictation.config import get_settings

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Configure the root logger once. Arguments override settings."""
    settings = get_settings()
    level_name = (level or settings.LOG_LEVEL or "INFO").upper()
    path = log_file if log_file is not None else settings.LOG_FILE

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if path:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=_FORMAT,
        handlers=handlers,
        force=True,
    )
