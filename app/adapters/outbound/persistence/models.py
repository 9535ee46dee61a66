"""SQLAlchemy ORM models for the marketplace."""

from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserModel(Base):
    """SQLAlchemy model for users table."""

    __tablename__ = "users"

    id = Column(String(36), primary_key=True)
    email = Column(String, nullable=False, unique=True, index=True)
    password = Column(String, nullable=False)  # werkzeug hash, never plaintext
    name = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    role = Column(String(32), nullable=False)  # CONSUMER, DEALER_SEMI, DEALER_OFFICIAL
    dealer_brand = Column(String, nullable=True)
    name_tag_url = Column(Text, nullable=True)
    is_verified = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    cars = relationship("CarModel", back_populates="owner")


class CarModel(Base):
    """SQLAlchemy model for cars table."""

    __tablename__ = "cars"

    id = Column(String(36), primary_key=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    brand = Column(String, nullable=False, index=True)
    model = Column(String, nullable=False)
    year = Column(Integer, nullable=False)
    description = Column(Text, nullable=True)
    condition = Column(String(16), nullable=False)  # BARU or BEKAS
    price = Column(Float, nullable=False)
    address = Column(String, nullable=False)
    city = Column(String, nullable=False)
    province = Column(String, nullable=False)
    mileage = Column(Integer, nullable=True)
    transmission = Column(String, nullable=True)
    fuel_type = Column(String, nullable=True)
    color = Column(String, nullable=True)
    tax_status = Column(String, nullable=True)
    tax_year = Column(Integer, nullable=True)
    stnk_status = Column(String, nullable=True)
    views = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    owner = relationship("UserModel", back_populates="cars")
    images = relationship(
        "CarImageModel",
        back_populates="car",
        cascade="all, delete-orphan",
    )


class CarImageModel(Base):
    """SQLAlchemy model for car_images table."""

    __tablename__ = "car_images"

    id = Column(String(36), primary_key=True)
    car_id = Column(
        String(36), ForeignKey("cars.id", ondelete="CASCADE"), nullable=False, index=True
    )
    url = Column(Text, nullable=False)
    position = Column(String(32), nullable=False)  # ImagePosition value

    car = relationship("CarModel", back_populates="images")


class SessionModel(Base):
    """SQLAlchemy model for sessions table."""

    __tablename__ = "sessions"

    token = Column(String, primary_key=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
