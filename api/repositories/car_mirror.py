"""
In-process copy of the cars table.

Reads are answered from here; the service updates it after every committed
write. All access goes through a lock because handlers run in a threadpool.
"""

from __future__ import annotations

import threading
from typing import Iterable, List, Optional

from api.domain.cars import Car


class CarMirror:
    """Insertion-ordered list of cars. Ids are not checked for uniqueness."""

    def __init__(self, cars: Iterable[Car] = ()) -> None:
        self._cars: List[Car] = list(cars)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._cars)

    def replace_all(self, cars: Iterable[Car]) -> None:
        loaded = list(cars)
        with self._lock:
            self._cars = loaded

    def all(self) -> List[Car]:
        with self._lock:
            return list(self._cars)

    def find_by_id(self, car_id: str) -> Optional[Car]:
        with self._lock:
            for car in self._cars:
                if car.id == car_id:
                    return car
        return None

    def filter_by_year(self, year: int) -> List[Car]:
        with self._lock:
            return [car for car in self._cars if car.year == year]

    def filter_by_make(self, make: str) -> List[Car]:
        with self._lock:
            return [car for car in self._cars if car.make == make]

    def filter_by_model(self, model: str) -> List[Car]:
        with self._lock:
            return [car for car in self._cars if car.model == model]

    def append(self, car: Car) -> None:
        with self._lock:
            self._cars.append(car)

    def remove_by_id(self, car_id: str) -> Optional[Car]:
        with self._lock:
            for idx, car in enumerate(self._cars):
                if car.id == car_id:
                    return self._cars.pop(idx)
        return None
