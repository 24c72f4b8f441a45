from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

_LOADED = False


def load_env() -> Path | None:
    global _LOADED
    if _LOADED:
        return None
    _LOADED = True

    src_dir = Path(__file__).resolve().parents[2]
    # Project root .env first, then one next to the sources.
    candidates = [
        src_dir.parent / ".env",
        src_dir / ".env",
    ]
    for path in candidates:
        if not path.exists():
            continue
        # Real environment variables win over the file.
        load_dotenv(dotenv_path=path, override=False)
        logger.debug("Environment loaded from %s", path)
        return path
    return None
