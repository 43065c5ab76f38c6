#!/usr/bin/env python3
"""
Insert a car directly into the database (the running server only picks it up
on its next start).

Usage:
  python scripts/add_car.py --id 1 --year 2020 --make Honda --model Civic
"""
from __future__ import annotations

import argparse
import sys

from api.db import create_tables
from api.domain.cars import Car, parse_year
from api.repositories.sql_repository import SQLRepository


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Insert a car into the database")
    ap.add_argument("--id", required=True, help="Car id (e.g. 1)")
    ap.add_argument("--year", required=True, help="Model year (integer)")
    ap.add_argument("--make", required=True, help="Manufacturer (e.g. Honda)")
    ap.add_argument("--model", required=True, help="Model name (e.g. Civic)")
    args = ap.parse_args(argv)

    car_id = (args.id or "").strip()
    if not car_id:
        raise SystemExit("Invalid id")
    year = parse_year(args.year)
    if year is None:
        raise SystemExit(f"Invalid year '{args.year}'")

    create_tables.create_all()
    repo = SQLRepository()
    if repo.get_car(car_id):
        raise SystemExit(f"Car '{car_id}' already exists")

    repo.insert_car(Car(id=car_id, year=year, make=args.make, model=args.model))
    print("OK: car added")
    print(f"  id: {car_id}")
    print(f"  {year} {args.make} {args.model}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
