"""Listing search filter."""

from dataclasses import asdict, dataclass
from typing import Any, Optional, Union

from app.domain.entities.listing import Car


@dataclass(frozen=True)
class ListingFilter:
    """
    Search criteria for active listings.

    All present criteria are AND-ed. ``search`` matches name, brand or model.
    Only active listings ever match.
    """

    condition: Optional[str] = None
    brand: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    city: Optional[str] = None
    search: Optional[str] = None

    def matches(self, car: Car) -> bool:
        """
        Evaluate the filter against a car in memory.

        Args:
            car: Car to check

        Returns:
            True if the car satisfies every active criterion
        """
        if not car.is_active:
            return False
        if self.condition is not None and car.condition.value != self.condition:
            return False
        if self.brand is not None and car.brand != self.brand:
            return False
        if self.min_price is not None and car.price < self.min_price:
            return False
        if self.max_price is not None and car.price > self.max_price:
            return False
        if self.city is not None and self.city.lower() not in (car.city or "").lower():
            return False
        if self.search is not None:
            needle = self.search.lower()
            haystacks = (car.name, car.brand, car.model)
            if not any(needle in (value or "").lower() for value in haystacks):
                return False
        return True

    def active_criteria(self) -> dict[str, Any]:
        """Criteria that are set, for logging."""
        return {key: value for key, value in asdict(self).items() if value is not None}


def _clean_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _parse_price(value: Union[str, float, int, None]) -> Optional[float]:
    """Parse a price bound; blank or non-numeric bounds are ignored."""
    if value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value)
    value = value.strip()
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def build_listing_filter(
    condition: Optional[str] = None,
    brand: Optional[str] = None,
    min_price: Union[str, float, int, None] = None,
    max_price: Union[str, float, int, None] = None,
    city: Optional[str] = None,
    search: Optional[str] = None,
) -> ListingFilter:
    """
    Build a listing filter from raw query parameters.

    Args:
        condition: Exact condition (BARU or BEKAS)
        brand: Exact brand
        min_price: Inclusive lower price bound
        max_price: Inclusive upper price bound
        city: Case-insensitive substring of the city
        search: Case-insensitive substring of name, brand or model

    Returns:
        ListingFilter with blank parameters treated as absent
    """
    return ListingFilter(
        condition=_clean_text(condition),
        brand=_clean_text(brand),
        min_price=_parse_price(min_price),
        max_price=_parse_price(max_price),
        city=_clean_text(city),
        search=_clean_text(search),
    )
