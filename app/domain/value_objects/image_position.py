"""Listing photo position value object."""

from enum import Enum


class ImagePosition(str, Enum):
    """Photo position; declaration order is the canonical order."""

    DEPAN = "DEPAN"
    SAMPING_KIRI = "SAMPING_KIRI"
    SAMPING_KANAN = "SAMPING_KANAN"
    BELAKANG = "BELAKANG"
    DALAM = "DALAM"
    DASHBOARD = "DASHBOARD"

    @property
    def sort_index(self) -> int:
        """Index of the position in the canonical order."""
        return REQUIRED_POSITIONS.index(self)


REQUIRED_POSITIONS: tuple[ImagePosition, ...] = tuple(ImagePosition)
