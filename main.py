#!/usr/bin/env python3
"""
credportal — email/password signup and login.

Usage:
  python main.py
  python main.py --port 8080
  python main.py --host 0.0.0.0 --reload

Environment variables (or .env):
  DATABASE_URL  SQLAlchemy URL of the user database (default: SQLite file
                credportal.db in the project directory)
  PORT          Listening port (default: 3000)
  HOST          Bind address (default: 127.0.0.1)
  LOG_LEVEL     Logging level (default: INFO)

Command-line flags override HOST and PORT.
"""

import argparse
from typing import Optional

import uvicorn

from core.config import get_settings


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="credportal",
        description="Serve the credportal signup/login web app.",
    )
    parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Bind address (default: {settings.host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Listening port (default: {settings.port})",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart the server when source files change (development only)",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    print(f"Server running at http://{args.host}:{args.port}")
    uvicorn.run(
        "asgi:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=get_settings().log_level.lower(),
    )


if __name__ == "__main__":
    main()
