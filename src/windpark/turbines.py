"""Wind turbine definition for the wind park."""

from dataclasses import dataclass

from .exceptions import TurbineError

# Capacities and costs are planned as 64-bit integers
MAX_TURBINE_VALUE = 2**63 - 1

@dataclass(frozen=True)
class WindTurbine:
    """Wind turbine with a fixed capacity and production cost.

    A turbine is either fully online, producing its whole ``capacity`` (MWh),
    or offline. ``production_cost`` is the cost per MWh (€/MWh) of running it.
    """
    identifier: str
    capacity: int
    production_cost: int

    def __post_init__(self):
        """Validate turbine specifications."""
        if not self.identifier or not isinstance(self.identifier, str):
            raise TurbineError("Turbine identifier must be a non-empty string")
        for field_name in ("capacity", "production_cost"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TurbineError(
                    f"Turbine {field_name} must be an integer, got {type(value).__name__}"
                )
            if value < 0:
                raise TurbineError(f"Turbine {field_name} cannot be negative")
            if value > MAX_TURBINE_VALUE:
                raise TurbineError(
                    f"Turbine {field_name} must be <= {MAX_TURBINE_VALUE}, got {value}"
                )

    def is_profitable(self, market_price: int) -> bool:
        """Check if running the turbine earns money at the given price."""
        return self.production_cost < market_price
