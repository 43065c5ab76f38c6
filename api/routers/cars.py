from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field, StrictInt

from api.core.responses import IndentedJSONResponse, message_response
from api.domain.cars import YEAR_MAX, YEAR_MIN, Car
from api.services.car_service import CarError, CarService

router = APIRouter(prefix="/cars", tags=["cars"], default_response_class=IndentedJSONResponse)


class CarPayload(BaseModel):
    """Request body; absent fields take zero values, year must be a JSON integer."""

    id: str = ""
    year: Annotated[StrictInt, Field(ge=YEAR_MIN, le=YEAR_MAX)] = 0
    make: str = ""
    model: str = ""

    def to_car(self) -> Car:
        return Car(id=self.id, year=self.year, make=self.make, model=self.model)


def _get_car_service(request: Request) -> CarService:
    svc = getattr(getattr(request.app, "state", None), "car_service", None)
    if not svc:
        raise RuntimeError("CarService not configured")
    return svc


def _error_response(err: CarError) -> IndentedJSONResponse:
    return message_response(err.message, err.status_code)


def _as_list(cars: list[Car]) -> list[dict]:
    return [car.to_dict() for car in cars]


@router.get("")
def list_cars(request: Request):
    svc = _get_car_service(request)
    return _as_list(svc.list_cars())


@router.get("/{car_id}")
def get_car(car_id: str, request: Request):
    svc = _get_car_service(request)
    try:
        car = svc.get_car(car_id)
    except CarError as exc:
        return _error_response(exc)
    return car.to_dict()


@router.get("/year/{year}")
def get_cars_by_year(year: str, request: Request):
    svc = _get_car_service(request)
    try:
        cars = svc.cars_by_year(year)
    except CarError as exc:
        return _error_response(exc)
    return _as_list(cars)


@router.get("/make/{make}")
def get_cars_by_make(make: str, request: Request):
    svc = _get_car_service(request)
    try:
        cars = svc.cars_by_make(make)
    except CarError as exc:
        return _error_response(exc)
    return _as_list(cars)


@router.get("/model/{model}")
def get_cars_by_model(model: str, request: Request):
    svc = _get_car_service(request)
    try:
        cars = svc.cars_by_model(model)
    except CarError as exc:
        return _error_response(exc)
    return _as_list(cars)


@router.post("", status_code=201)
def create_car(payload: CarPayload, request: Request):
    svc = _get_car_service(request)
    try:
        car = svc.create_car(payload.to_car())
    except CarError as exc:
        return _error_response(exc)
    return car.to_dict()


@router.delete("/{car_id}")
def delete_car(car_id: str, request: Request):
    svc = _get_car_service(request)
    try:
        car = svc.delete_car(car_id)
    except CarError as exc:
        return _error_response(exc)
    return car.to_dict()
