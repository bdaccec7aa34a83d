from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "DETECTIVE_QUEST_"


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    host: str = "127.0.0.1"
    port: str = "5001"

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return Settings(
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", "").strip().upper() or Settings.log_level,
            log_file=env.get(f"{ENV_PREFIX}LOG_FILE", "").strip() or None,
            host=env.get(f"{ENV_PREFIX}HOST", "").strip() or Settings.host,
            port=env.get(f"{ENV_PREFIX}PORT", "").strip() or Settings.port,
        )

    def api_port(self) -> int:
        # only the HTTP server needs a port; the terminal game never reads it
        try:
            return int(self.port)
        except ValueError:
            raise ValueError(f"{ENV_PREFIX}PORT must be an integer, got '{self.port}'") from None
