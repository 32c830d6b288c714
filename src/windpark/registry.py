"""Turbine registry implementations for the wind park."""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from .exceptions import DuplicateTurbineError, TurbineNotFoundError
from .turbines import WindTurbine

class TurbineRegistry(ABC):
    """Abstract base class for turbine stores."""

    @abstractmethod
    def list_all_turbines(self) -> List[WindTurbine]:
        """Return all turbines in a stable order."""
        pass

    def total_capacity(self) -> int:
        """Get total capacity of all registered turbines."""
        return sum(t.capacity for t in self.list_all_turbines())

class InMemoryTurbineRegistry(TurbineRegistry):
    """Turbine registry keeping turbines in insertion order."""

    def __init__(self, turbines: Optional[Iterable[WindTurbine]] = None):
        """Initialize registry with optional turbines."""
        self._turbines: Dict[str, WindTurbine] = {}
        for turbine in turbines or []:
            self.add_turbine(turbine)

    def add_turbine(self, turbine: WindTurbine) -> None:
        """Add a new turbine to the registry."""
        if turbine.identifier in self._turbines:
            raise DuplicateTurbineError(
                f"Turbine {turbine.identifier} is already registered"
            )
        self._turbines[turbine.identifier] = turbine

    def remove_turbine(self, identifier: str) -> WindTurbine:
        """Remove a turbine from the registry."""
        if identifier not in self._turbines:
            raise TurbineNotFoundError(f"Turbine {identifier} not found")
        return self._turbines.pop(identifier)

    def get_turbine(self, identifier: str) -> WindTurbine:
        """Get a turbine by identifier."""
        try:
            return self._turbines[identifier]
        except KeyError:
            raise TurbineNotFoundError(f"Turbine {identifier} not found") from None

    def list_all_turbines(self) -> List[WindTurbine]:
        return list(self._turbines.values())

    def __len__(self) -> int:
        return len(self._turbines)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._turbines
