from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
        return default


APP_NAME = "Typing Quotes"

QUOTE_API_URL = os.environ.get("TYPING_QUOTES_API_URL", "https://zenquotes.io/api/random")
FETCH_TIMEOUT_S = _env_float("TYPING_QUOTES_TIMEOUT", 2.0)
USER_AGENT = "typing-quotes/0.1 (python requests)"

DATA_DIR = Path(os.environ.get("TYPING_QUOTES_HOME", Path.home() / ".typing-quotes"))
DB_PATH = DATA_DIR / "quotes.db"
LOG_PATH = DATA_DIR / "typing-quotes.log"
LOG_LEVEL = os.environ.get("TYPING_QUOTES_LOG_LEVEL", "INFO").upper()
