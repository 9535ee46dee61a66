"""Car condition value object."""

from enum import Enum


class CarCondition(str, Enum):
    """Listing condition: new or used."""

    BARU = "BARU"
    BEKAS = "BEKAS"
