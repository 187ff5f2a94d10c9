"""Load settings from environment (.env and env vars)."""

from __future__ import annotations

import os
from pathlib import Path

from .models import ConversionSettings

# Load .env from project root if present
_env_path = Path(__file__).resolve().parent.parent.parent / ".env"
if _env_path.exists():
    from dotenv import load_dotenv
    load_dotenv(_env_path)

_PREFIX = "XDOC2ASCIIDOC_"


def _str(key: str, default: str = "") -> str:
    return (os.environ.get(_PREFIX + key) or "").strip() or default


def _bool(key: str, default: bool = False) -> bool:
    v = _str(key)
    if not v:
        return default
    return v.lower() in ("1", "true", "yes", "on")


def load_settings(**overrides) -> ConversionSettings:
    """Build settings from the environment; keyword overrides win."""
    values = {
        "input_suffix": _str("INPUT_SUFFIX", ".xdoc"),
        "output_suffix": _str("OUTPUT_SUFFIX", ".asc"),
        "input_encoding": _str("INPUT_ENCODING", "utf-8"),
        "max_depth": int(_str("MAX_DEPTH", "100")),
        "overwrite": _bool("OVERWRITE"),
        "backup_suffix": _str("BACKUP_SUFFIX") or None,
        "strict": _bool("STRICT"),
        "allow_duplicate_chapters": _bool("ALLOW_DUPLICATE_CHAPTERS"),
        "log_level": _str("LOG_LEVEL", "INFO").upper(),
    }
    values.update(overrides)
    return ConversionSettings(**values)
