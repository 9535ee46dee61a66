"""Car repository adapters."""

from app.adapters.outbound.car.in_memory_car_repository import InMemoryCarRepository
from app.adapters.outbound.car.postgres_car_repository import PostgresCarRepository

__all__ = [
    "InMemoryCarRepository",
    "PostgresCarRepository",
]
