"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from api.db.models import CarEntity
from api.db.session import get_session
from api.domain.cars import Car

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the database rejects or fails a statement."""


class DuplicateKeyError(StorageError):
    """Raised when an insert clashes with an existing primary key."""


def _entity_to_car(entity: CarEntity) -> Car:
    return Car(id=entity.id, year=int(entity.year), make=entity.make, model=entity.model)


class SQLRepository:
    """CRUD helpers wrapping the SQLAlchemy session."""

    def list_cars(self) -> list[Car]:
        try:
            with get_session() as session:
                rows = session.execute(select(CarEntity)).scalars().all()
                return [_entity_to_car(row) for row in rows]
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to load cars: {exc}") from exc

    def get_car(self, car_id: str) -> Optional[Car]:
        try:
            with get_session() as session:
                entity = session.get(CarEntity, car_id)
                return _entity_to_car(entity) if entity else None
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to load car {car_id}: {exc}") from exc

    def insert_car(self, car: Car) -> None:
        entity = CarEntity(id=car.id, year=car.year, make=car.make, model=car.model)
        try:
            with get_session() as session:
                session.add(entity)
                session.commit()
        except IntegrityError as exc:
            raise DuplicateKeyError(f"Car {car.id} already stored") from exc
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to insert car {car.id}: {exc}") from exc

    def delete_car(self, car_id: str) -> None:
        try:
            with get_session() as session:
                session.execute(delete(CarEntity).where(CarEntity.id == car_id))
                session.commit()
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to delete car {car_id}: {exc}") from exc
