"""Money in Indonesian Rupiah value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MoneyIDR:
    """Money value object in Indonesian Rupiah."""

    amount: float

    def __post_init__(self) -> None:
        """Validate money amount."""
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def format(self) -> str:
        """
        Format as Rupiah without decimals, using dots as thousands separators.

        Returns:
            Formatted string, e.g. "Rp 150.000.000"
        """
        rounded = int(round(self.amount))
        return "Rp " + f"{rounded:,}".replace(",", ".")

    def __le__(self, other: "MoneyIDR") -> bool:
        """Compare less than or equal."""
        return self.amount <= other.amount

    def __ge__(self, other: "MoneyIDR") -> bool:
        """Compare greater than or equal."""
        return self.amount >= other.amount
