"""
Car use cases: lookups over the in-memory mirror and writes that go to the
database first and to the mirror once committed.
"""

from __future__ import annotations

import logging
import threading
from typing import List, Optional

from api.db import create_tables
from api.domain.cars import Car, parse_year
from api.repositories.car_mirror import CarMirror
from api.repositories.sql_repository import DuplicateKeyError, SQLRepository

logger = logging.getLogger(__name__)


class CarError(Exception):
    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class CarNotFoundError(CarError):
    def __init__(self, message: str = "car not found."):
        super().__init__(message, 404)


class InvalidYearError(CarError):
    def __init__(self, message: str = "invalid year."):
        super().__init__(message, 400)


class DuplicateCarError(CarError):
    def __init__(self, message: str = "car already exists."):
        super().__init__(message, 409)


class CarService:
    """Serves reads from the mirror and keeps it in step with the database."""

    def __init__(
        self,
        repository: Optional[SQLRepository] = None,
        mirror: Optional[CarMirror] = None,
    ) -> None:
        self.repository = repository or SQLRepository()
        self.mirror = mirror or CarMirror()
        self._write_lock = threading.Lock()

    def load(self) -> int:
        """Ensure the schema exists and fill the mirror from the database."""
        create_tables.create_all()
        cars = self.repository.list_cars()
        self.mirror.replace_all(cars)
        logger.info("Loaded %d cars from storage", len(cars))
        return len(cars)

    # -------------------------- reads --------------------------
    def list_cars(self) -> List[Car]:
        return self.mirror.all()

    def get_car(self, car_id: str) -> Car:
        car = self.mirror.find_by_id(car_id)
        if car is None:
            raise CarNotFoundError()
        return car

    def cars_by_year(self, raw_year: str) -> List[Car]:
        year = parse_year(raw_year)
        if year is None:
            raise InvalidYearError()
        cars = self.mirror.filter_by_year(year)
        if not cars:
            raise CarNotFoundError("year not found.")
        return cars

    def cars_by_make(self, make: str) -> List[Car]:
        cars = self.mirror.filter_by_make(make)
        if not cars:
            raise CarNotFoundError("make not found.")
        return cars

    def cars_by_model(self, model: str) -> List[Car]:
        cars = self.mirror.filter_by_model(model)
        if not cars:
            raise CarNotFoundError("model not found.")
        return cars

    # -------------------------- writes --------------------------
    def create_car(self, car: Car) -> Car:
        with self._write_lock:
            try:
                self.repository.insert_car(car)
            except DuplicateKeyError as exc:
                raise DuplicateCarError() from exc
            self.mirror.append(car)
        logger.info("Created car %s (%s %s %s)", car.id, car.year, car.make, car.model)
        return car

    def delete_car(self, car_id: str) -> Car:
        with self._write_lock:
            if self.mirror.find_by_id(car_id) is None:
                raise CarNotFoundError()
            self.repository.delete_car(car_id)
            removed = self.mirror.remove_by_id(car_id)
        logger.info("Deleted car %s", car_id)
        return removed
