#!/usr/bin/env python3
"""
Run the school board API with uvicorn.

Usage:
  python -m schoolboard [--host 0.0.0.0] [--port 3000] [--reload]
"""
from __future__ import annotations

import argparse
import os

import uvicorn

from schoolboard.core.config import get_settings


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Serve the school announcement board")
    ap.add_argument("--host", default=settings.host, help="Interface to bind (default: $HOST or 0.0.0.0)")
    ap.add_argument("--port", type=int, default=settings.port, help="Port to listen on (default: $PORT or 3000)")
    ap.add_argument("--reload", action="store_true", help="Reload on code changes (development)")
    args = ap.parse_args()
    os.environ["PORT"] = str(args.port)
    get_settings.cache_clear()

    uvicorn.run(
        "schoolboard.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
