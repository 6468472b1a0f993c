from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from .config import Settings, get_settings


def setup_logging(settings: Optional[Settings] = None) -> None:
    s = settings or get_settings()

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if s.log_file:
        Path(s.log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(s.log_file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, s.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=handlers,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
