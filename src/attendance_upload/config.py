"""Runtime configuration sourced from the environment and an optional ``.env``."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

DEFAULT_API_URL = "https://zone-etl-webapp-7ozjbw43ka-uc.a.run.app"


def _optional_float(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"ATTENDANCE_HTTP_TIMEOUT must be a number, got {raw!r}") from exc
    return value if value > 0 else None


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    http_timeout: Optional[float] = None
    export_dir: Path = Path(".")
    default_credential: str = ""

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            api_url=(env.get("ATTENDANCE_API_URL") or "").strip() or DEFAULT_API_URL,
            http_timeout=_optional_float(env.get("ATTENDANCE_HTTP_TIMEOUT")),
            export_dir=Path(env.get("ATTENDANCE_EXPORT_DIR") or "."),
            default_credential=env.get("ATTENDANCE_PASSWORD") or "",
        )


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Populate defaults from ``.env`` (no overrides) and build ``Settings``."""
    load_dotenv(env_file or os.getenv("ENV_FILE", ".env"), override=False)
    return Settings.from_env()
