"""
Server entrypoint: run the FastAPI app under uvicorn.

- Binds 127.0.0.1 by default (use --host to expose it).
- Without --port, picks the first free port in 8000..8010.

Run from backend dir: python backend_entry.py [--host HOST] [--port PORT]
"""

from __future__ import annotations

import argparse
import logging
import socket
import sys
from pathlib import Path
from typing import Optional

_backend_dir = Path(__file__).resolve().parent
if str(_backend_dir) not in sys.path:
    sys.path.insert(0, str(_backend_dir))

DEFAULT_PORTS = range(8000, 8011)


def _pick_port(host: str) -> int:
    """Return first free port in DEFAULT_PORTS. Bind test then close."""
    for port in DEFAULT_PORTS:
        try:
            with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
                s.bind((host, port))
                return port
        except OSError:
            continue
    return DEFAULT_PORTS[0]  # fallback (may fail later if all busy)


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Football manager API server")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=None)
    args = parser.parse_args(argv)

    port = args.port or _pick_port(args.host)

    from main import app, settings
    import uvicorn

    logging.getLogger(__name__).info("Backend entry: host=%s port=%s env=%s", args.host, port, settings.env)
    uvicorn.run(app, host=args.host, port=port, log_level=settings.log_level.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
