"""Mutable market state of a wind park."""

from .validation import ParkValidator

class ParkState:
    """Market price and production target of a single park.

    The state is only changed through its setters, which validate before
    storing so a rejected value never leaves a partial update behind. The
    maximum capacity is passed in by the caller on every target change since
    the fleet can change between calls.
    """

    def __init__(self):
        """Initialize state with zero price and zero target."""
        self._market_price = 0
        self._production_target = 0

    @property
    def market_price(self) -> int:
        """Current market price (€/MWh)."""
        return self._market_price

    @property
    def production_target(self) -> int:
        """Current production target (MWh)."""
        return self._production_target

    def get_market_price(self) -> int:
        """Get the market price."""
        return self._market_price

    def set_market_price(self, value: int) -> None:
        """Set the market price, rejecting negative values."""
        ParkValidator.validate_market_price(value)
        self._market_price = value

    def get_production_target(self) -> int:
        """Get the production target."""
        return self._production_target

    def set_production_target(self, value: int, max_capacity: int) -> None:
        """Set the production target within ``[0, max_capacity]``."""
        ParkValidator.validate_production_target(value, max_capacity)
        self._production_target = value

    def update_production_target(self, delta: int, max_capacity: int) -> None:
        """Shift the production target by ``delta``."""
        ParkValidator.validate_delta(delta)
        self.set_production_target(self._production_target + delta, max_capacity)

    def __repr__(self) -> str:
        return (
            f"ParkState(market_price={self._market_price}, "
            f"production_target={self._production_target})"
        )
