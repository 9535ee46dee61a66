"""Postgres-backed user repository adapter."""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.adapters.outbound.persistence.models import UserModel
from app.adapters.outbound.persistence.timestamps import as_utc
from app.application.ports.user_repository import UserRepository
from app.domain.entities.user import User
from app.domain.value_objects.user_role import UserRole
from app.infrastructure.db import get_db_session
from app.infrastructure.logging.logger import logger


def user_model_to_entity(model: UserModel) -> User:
    """
    Convert UserModel to User entity.

    Args:
        model: SQLAlchemy model instance

    Returns:
        User entity
    """
    return User(
        id=model.id,
        email=model.email,
        password_hash=model.password,
        name=model.name,
        phone=model.phone,
        role=UserRole(model.role),
        dealer_brand=model.dealer_brand,
        name_tag_url=model.name_tag_url,
        is_verified=model.is_verified,
        created_at=as_utc(model.created_at),
        updated_at=as_utc(model.updated_at),
    )


class PostgresUserRepository(UserRepository):
    """Postgres implementation of user repository."""

    def _entity_to_model(self, user: User) -> UserModel:
        """
        Convert User entity to a new UserModel.

        Args:
            user: User entity

        Returns:
            UserModel instance
        """
        return UserModel(
            id=user.id,
            email=user.email,
            password=user.password_hash,
            name=user.name,
            phone=user.phone,
            role=user.role.value,
            dealer_brand=user.dealer_brand,
            name_tag_url=user.name_tag_url,
            is_verified=user.is_verified,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    async def get(self, user_id: str) -> Optional[User]:
        """
        Get a user by id.

        Args:
            user_id: User identifier

        Returns:
            User entity, or None if not found
        """
        db: Session = get_db_session()
        try:
            model = db.query(UserModel).filter(UserModel.id == user_id).first()
            if model is None:
                return None
            return user_model_to_entity(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error while getting user {user_id}: {str(e)}")
            raise
        finally:
            db.close()

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get a user by exact email.

        Args:
            email: Email as stored

        Returns:
            User entity, or None if not found
        """
        db: Session = get_db_session()
        try:
            model = db.query(UserModel).filter(UserModel.email == email).first()
            if model is None:
                return None
            return user_model_to_entity(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error while looking up user by email: {str(e)}")
            raise
        finally:
            db.close()

    async def add(self, user: User) -> User:
        """
        Insert a new user.

        Args:
            user: User entity

        Returns:
            The stored user
        """
        db: Session = get_db_session()
        try:
            model = self._entity_to_model(user)
            db.add(model)
            db.commit()
            db.refresh(model)
            return user_model_to_entity(model)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while saving user {user.id}: {str(e)}")
            raise
        finally:
            db.close()
