from __future__ import annotations

import logging
import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "True", "yes", "on"}


def normalize_base_url(url: str) -> str:
    url = url.strip()
    if not url:
        return ""
    # Allow passing just host:port.
    if "://" not in url:
        url = "http://" + url
    return url.rstrip("/")


@dataclass(frozen=True)
class Settings:
    """Process settings read from the environment.

    - MOVIECAST_URL: existing server for `run()` to attach to.
    - MOVIECAST_SAMPLE: seed the process registry with a sample catalog.
    - MOVIECAST_LOG_LEVEL: default level for `setup_logging()`.
    """

    server_url: str = ""
    seed_sample: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            server_url=normalize_base_url(os.getenv("MOVIECAST_URL", "")),
            seed_sample=os.getenv("MOVIECAST_SAMPLE", "0") in _TRUTHY,
            log_level=os.getenv("MOVIECAST_LOG_LEVEL", "INFO").upper(),
        )


def setup_logging(level: str = "INFO") -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
