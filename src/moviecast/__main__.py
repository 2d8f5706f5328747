from __future__ import annotations

import argparse
import time

from .core.settings import Settings, setup_logging
from .runtime.server import run


def main() -> None:
    settings = Settings.from_env()

    p = argparse.ArgumentParser(prog="moviecast", description="moviecast: in-memory movie/actor credits registry")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8000)
    p.add_argument("--log-level", default=settings.log_level)
    args = p.parse_args()

    setup_logging(args.log_level)
    srv = run(host=args.host, port=args.port, log_level=args.log_level.lower(), new_server=True)
    print(srv.url)

    # Block forever (so it behaves like a normal CLI server)
    while True:
        time.sleep(3600)


if __name__ == "__main__":
    main()
