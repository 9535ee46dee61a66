"""Postgres-backed login session repository adapter."""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session as DBSession

from app.adapters.outbound.persistence.models import SessionModel
from app.adapters.outbound.persistence.timestamps import as_utc
from app.application.ports.session_repository import SessionRepository
from app.domain.entities.session import Session
from app.infrastructure.db import get_db_session
from app.infrastructure.logging.logger import logger


class PostgresSessionRepository(SessionRepository):
    """Postgres implementation of session repository."""

    def _model_to_entity(self, model: SessionModel) -> Session:
        """
        Convert SessionModel to Session entity.

        Args:
            model: SQLAlchemy model instance

        Returns:
            Session entity
        """
        return Session(
            token=model.token,
            user_id=model.user_id,
            expires_at=as_utc(model.expires_at),
            created_at=as_utc(model.created_at),
        )

    async def get(self, token: str) -> Optional[Session]:
        """
        Get a session by token.

        Args:
            token: Opaque session token

        Returns:
            Session, or None if not found
        """
        db: DBSession = get_db_session()
        try:
            model = db.query(SessionModel).filter(SessionModel.token == token).first()
            if model is None:
                return None
            return self._model_to_entity(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error while getting session: {str(e)}")
            raise
        finally:
            db.close()

    async def save(self, session: Session) -> None:
        """
        Save a session (upsert by token).

        Args:
            session: Session to store
        """
        db: DBSession = get_db_session()
        try:
            model = db.query(SessionModel).filter(SessionModel.token == session.token).first()
            if model:
                model.user_id = session.user_id
                model.expires_at = session.expires_at
            else:
                db.add(
                    SessionModel(
                        token=session.token,
                        user_id=session.user_id,
                        expires_at=session.expires_at,
                        created_at=session.created_at,
                    )
                )
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(
                f"Database error while saving session for user {session.user_id}: {str(e)}"
            )
            raise
        finally:
            db.close()

    async def delete(self, token: str) -> None:
        """
        Delete a session.

        Args:
            token: Opaque session token
        """
        db: DBSession = get_db_session()
        try:
            db.query(SessionModel).filter(SessionModel.token == token).delete()
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while deleting session: {str(e)}")
            raise
        finally:
            db.close()
