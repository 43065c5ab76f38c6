from __future__ import annotations

import pytest

from api.db import models
from api.db import session as db_session
from api.domain.cars import Car
from api.repositories.car_mirror import CarMirror
from api.repositories.sql_repository import SQLRepository, StorageError
from api.services.car_service import (
    CarNotFoundError,
    CarService,
    DuplicateCarError,
    InvalidYearError,
)

CIVIC = Car(id="1", year=2020, make="Honda", model="Civic")


class FailingRepository(SQLRepository):
    def insert_car(self, car: Car) -> None:
        raise StorageError("disk on fire")

    def delete_car(self, car_id: str) -> None:
        raise StorageError("disk on fire")


def test_load_creates_missing_table(temp_db):
    models.Base.metadata.drop_all(bind=db_session.get_engine())
    svc = CarService()

    assert svc.load() == 0
    assert SQLRepository().list_cars() == []


def test_load_keeps_empty_table_and_existing_rows(temp_db):
    repo = SQLRepository()
    svc = CarService()
    assert svc.load() == 0

    repo.insert_car(CIVIC)
    fresh = CarService()
    assert fresh.load() == 1
    assert fresh.list_cars() == [CIVIC]


def test_create_then_get_and_delete(temp_db):
    svc = CarService()
    svc.load()

    assert svc.create_car(CIVIC) == CIVIC
    assert svc.get_car("1") == CIVIC
    assert SQLRepository().get_car("1") == CIVIC

    assert svc.delete_car("1") == CIVIC
    with pytest.raises(CarNotFoundError):
        svc.get_car("1")
    assert SQLRepository().get_car("1") is None

    with pytest.raises(CarNotFoundError) as excinfo:
        svc.delete_car("1")
    assert excinfo.value.status_code == 404


def test_duplicate_create_leaves_single_mirror_entry(temp_db):
    svc = CarService()
    svc.load()
    svc.create_car(CIVIC)

    with pytest.raises(DuplicateCarError) as excinfo:
        svc.create_car(Car(id="1", year=1999, make="Mazda", model="Miata"))

    assert excinfo.value.status_code == 409
    assert svc.list_cars() == [CIVIC]


def test_filters_report_not_found_messages(temp_db):
    svc = CarService()
    svc.load()
    svc.create_car(CIVIC)

    assert svc.cars_by_year("2020") == [CIVIC]
    assert svc.cars_by_make("Honda") == [CIVIC]
    assert svc.cars_by_model("Civic") == [CIVIC]

    with pytest.raises(CarNotFoundError, match="year not found."):
        svc.cars_by_year("1999")
    with pytest.raises(CarNotFoundError, match="make not found."):
        svc.cars_by_make("honda")
    with pytest.raises(CarNotFoundError, match="model not found."):
        svc.cars_by_model("civic")


def test_invalid_year_never_touches_mirror():
    class GuardedMirror(CarMirror):
        def filter_by_year(self, year):
            raise AssertionError("mirror should not be scanned")

    svc = CarService(repository=FailingRepository(), mirror=GuardedMirror([CIVIC]))

    with pytest.raises(InvalidYearError) as excinfo:
        svc.cars_by_year("abc")
    assert excinfo.value.message == "invalid year."
    assert excinfo.value.status_code == 400


def test_storage_failure_leaves_mirror_untouched():
    mirror = CarMirror([CIVIC])
    svc = CarService(repository=FailingRepository(), mirror=mirror)

    with pytest.raises(StorageError):
        svc.create_car(Car(id="2", year=2021, make="Honda", model="Fit"))
    with pytest.raises(StorageError):
        svc.delete_car("1")

    assert mirror.all() == [CIVIC]
