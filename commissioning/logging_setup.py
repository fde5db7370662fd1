"""
Logging setup for the commissioning tools.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def init_logging(level: str = "WARNING", log_file: Optional[str] = None) -> None:
    root = logging.getLogger()
    root.setLevel(level)

    # Don't add multiple handlers if init called twice
    if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    if log_file:
        log_path = Path(log_file).resolve()
        if not any(isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", "") == str(log_path) for h in root.handlers):
            log_path.parent.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(log_path, encoding="utf-8")
            fh.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(fh)
