"""Runtime settings read from the environment."""

from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_HISTORY_PATH = pathlib.Path("~/.framers/history.json")
DEFAULT_HISTORY_LIMIT = 50


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8000
    history_path: pathlib.Path = DEFAULT_HISTORY_PATH
    history_limit: int = DEFAULT_HISTORY_LIMIT
    log_level: str = "info"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            host=env.get("FRAMERS_HOST", cls.host),
            port=int(env.get("FRAMERS_PORT", str(cls.port))),
            history_path=pathlib.Path(env.get("FRAMERS_HISTORY_PATH", str(DEFAULT_HISTORY_PATH))).expanduser(),
            history_limit=int(env.get("FRAMERS_HISTORY_LIMIT", str(DEFAULT_HISTORY_LIMIT))),
            log_level=env.get("FRAMERS_LOG_LEVEL", cls.log_level).lower(),
        )
