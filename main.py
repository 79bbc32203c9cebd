"""
API start script: serves the vat-number check endpoints via uvicorn.

Usage:
    uv run python main.py
    uv run python main.py --host 0.0.0.0 --port 8080 --strict --log-level debug
"""

from __future__ import annotations

import argparse
import os

import uvicorn


def main() -> None:
    parser = argparse.ArgumentParser(description="Start the vat-number API")
    parser.add_argument(
        "--host", default="127.0.0.1", help="Bind host (default: 127.0.0.1)"
    )
    parser.add_argument(
        "--port", type=int, default=8000, help="Bind port (default: 8000)"
    )
    parser.add_argument(
        "--reload", action="store_true", help="Enable auto-reload on code changes"
    )
    parser.add_argument(
        "--workers", type=int, default=1, help="Number of worker processes (default: 1)"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject unknown jurisdictions unless a request overrides it",
    )
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["critical", "error", "warning", "info", "debug"],
        help="Log level for the app and uvicorn (default: info)",
    )
    args = parser.parse_args()

    # api.main reads its configuration from the environment at import time,
    # which also reaches worker processes.
    if args.strict:
        os.environ["STRICT_JURISDICTIONS"] = "1"
    os.environ["LOG_LEVEL"] = args.log_level.upper()

    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        workers=args.workers if not args.reload else 1,
        log_level=args.log_level,
    )


if __name__ == "__main__":
    main()
