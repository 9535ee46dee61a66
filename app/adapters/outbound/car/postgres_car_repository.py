"""Postgres-backed car repository adapter."""

from typing import Any, Optional

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session, joinedload, selectinload

from app.adapters.outbound.persistence.models import CarImageModel, CarModel
from app.adapters.outbound.persistence.timestamps import as_utc
from app.adapters.outbound.user.postgres_user_repository import user_model_to_entity
from app.application.ports.car_repository import CarRepository
from app.domain.entities.listing import Car, CarImage
from app.domain.services.listing_filter import ListingFilter
from app.domain.value_objects.car_condition import CarCondition
from app.domain.value_objects.image_position import ImagePosition
from app.infrastructure.db import get_db_session
from app.infrastructure.logging.logger import logger


def build_filter_clauses(listing_filter: ListingFilter) -> list[Any]:
    """
    Translate a listing filter into SQLAlchemy WHERE clauses.

    Args:
        listing_filter: Search criteria

    Returns:
        Clauses to AND together; always includes is_active
    """
    clauses: list[Any] = [CarModel.is_active.is_(True)]

    if listing_filter.condition is not None:
        clauses.append(CarModel.condition == listing_filter.condition)
    if listing_filter.brand is not None:
        clauses.append(CarModel.brand == listing_filter.brand)
    if listing_filter.min_price is not None:
        clauses.append(CarModel.price >= listing_filter.min_price)
    if listing_filter.max_price is not None:
        clauses.append(CarModel.price <= listing_filter.max_price)
    if listing_filter.city is not None:
        clauses.append(CarModel.city.icontains(listing_filter.city, autoescape=True))
    if listing_filter.search is not None:
        term = listing_filter.search
        clauses.append(
            or_(
                CarModel.name.icontains(term, autoescape=True),
                CarModel.brand.icontains(term, autoescape=True),
                CarModel.model.icontains(term, autoescape=True),
            )
        )

    return clauses


def car_model_to_entity(model: CarModel) -> Car:
    """
    Convert CarModel (with images and owner loaded) to Car entity.

    Args:
        model: SQLAlchemy model instance

    Returns:
        Car entity
    """
    return Car(
        id=model.id,
        user_id=model.user_id,
        name=model.name,
        brand=model.brand,
        model=model.model,
        year=model.year,
        description=model.description,
        condition=CarCondition(model.condition),
        price=model.price,
        address=model.address,
        city=model.city,
        province=model.province,
        mileage=model.mileage,
        transmission=model.transmission,
        fuel_type=model.fuel_type,
        color=model.color,
        tax_status=model.tax_status,
        tax_year=model.tax_year,
        stnk_status=model.stnk_status,
        views=model.views,
        is_active=model.is_active,
        images=[
            CarImage(
                id=image.id,
                car_id=image.car_id,
                position=ImagePosition(image.position),
                url=image.url,
            )
            for image in model.images
        ],
        owner=user_model_to_entity(model.owner) if model.owner is not None else None,
        created_at=as_utc(model.created_at),
        updated_at=as_utc(model.updated_at),
    )


class PostgresCarRepository(CarRepository):
    """Postgres implementation of car repository."""

    def _query(self, db: Session) -> Query:
        """Car query with images and owner loaded explicitly."""
        return db.query(CarModel).options(
            selectinload(CarModel.images),
            joinedload(CarModel.owner),
        )

    def _entity_to_model(self, car: Car) -> CarModel:
        """
        Convert Car entity to a new CarModel with its images.

        Args:
            car: Car entity

        Returns:
            CarModel instance
        """
        return CarModel(
            id=car.id,
            user_id=car.user_id,
            name=car.name,
            brand=car.brand,
            model=car.model,
            year=car.year,
            description=car.description,
            condition=car.condition.value,
            price=car.price,
            address=car.address,
            city=car.city,
            province=car.province,
            mileage=car.mileage,
            transmission=car.transmission,
            fuel_type=car.fuel_type,
            color=car.color,
            tax_status=car.tax_status,
            tax_year=car.tax_year,
            stnk_status=car.stnk_status,
            views=car.views,
            is_active=car.is_active,
            created_at=car.created_at,
            updated_at=car.updated_at,
            images=[
                CarImageModel(id=image.id, url=image.url, position=image.position.value)
                for image in car.images
            ],
        )

    async def add(self, car: Car) -> Car:
        """
        Insert a car and its images in one transaction.

        Args:
            car: Car entity with images

        Returns:
            Stored car with images and owner
        """
        db: Session = get_db_session()
        try:
            db.add(self._entity_to_model(car))
            db.commit()
            model = self._query(db).filter(CarModel.id == car.id).one()
            return car_model_to_entity(model)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while saving car {car.id}: {str(e)}")
            raise
        finally:
            db.close()

    async def get(self, car_id: str) -> Optional[Car]:
        """
        Get a car by id.

        Args:
            car_id: Car identifier

        Returns:
            Car with images and owner, or None if not found
        """
        db: Session = get_db_session()
        try:
            model = self._query(db).filter(CarModel.id == car_id).first()
            if model is None:
                return None
            return car_model_to_entity(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error while getting car {car_id}: {str(e)}")
            raise
        finally:
            db.close()

    async def search(self, listing_filter: ListingFilter) -> list[Car]:
        """
        Find cars matching a filter, newest first.

        Args:
            listing_filter: Search criteria

        Returns:
            Matching cars with images and owner
        """
        db: Session = get_db_session()
        try:
            models = (
                self._query(db)
                .filter(*build_filter_clauses(listing_filter))
                .order_by(CarModel.created_at.desc())
                .all()
            )
            return [car_model_to_entity(model) for model in models]
        except SQLAlchemyError as e:
            logger.error(f"Database error while searching cars: {str(e)}")
            raise
        finally:
            db.close()

    async def increment_views(self, car_id: str) -> None:
        """
        Add one to a car's view counter with a single UPDATE.

        Args:
            car_id: Car identifier
        """
        db: Session = get_db_session()
        try:
            db.query(CarModel).filter(CarModel.id == car_id).update(
                {CarModel.views: CarModel.views + 1},
                synchronize_session=False,
            )
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while incrementing views for car {car_id}: {str(e)}")
            raise
        finally:
            db.close()
