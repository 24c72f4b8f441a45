from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from domain.qr.qr_code_generator import DEFAULT_QR_SIZE

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid integer for %s: %r, using %s", name, raw, default)
        return default


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8000
    title: str = "Todo List"
    debug: bool = False
    log_dir: Path = Path("./data/logs")
    qr_size: int = DEFAULT_QR_SIZE

    @classmethod
    def from_env(cls) -> Settings:
        qr_size = _env_int("TODOAPP_QR_SIZE", DEFAULT_QR_SIZE)
        if qr_size <= 0:
            logger.warning("TODOAPP_QR_SIZE must be positive, using %s", DEFAULT_QR_SIZE)
            qr_size = DEFAULT_QR_SIZE
        return cls(
            host=os.getenv("TODOAPP_HOST") or cls.host,
            port=_env_int("TODOAPP_PORT", cls.port),
            title=os.getenv("TODOAPP_TITLE") or cls.title,
            debug=os.getenv("TODOAPP_DEBUG") == "1",
            log_dir=Path(os.getenv("TODOAPP_LOG_DIR") or cls.log_dir),
            qr_size=qr_size,
        )
