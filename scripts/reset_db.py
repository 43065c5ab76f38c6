#!/usr/bin/env python3
"""
Drop and recreate the cars table. Every stored car is lost.

Usage:
  python scripts/reset_db.py --yes
"""
from __future__ import annotations

import argparse
import sys

from api.core.config import get_settings
from api.db import create_tables


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Drop and recreate the cars table")
    ap.add_argument("--yes", action="store_true", help="Confirm the destructive reset")
    args = ap.parse_args(argv)

    if not args.yes:
        raise SystemExit("Refusing to reset without --yes")

    create_tables.reset_all()
    print("OK: cars table recreated")
    print(f"  database: {get_settings().database_url}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
