"""Data models for the wind park."""

from dataclasses import dataclass
from typing import Dict, List, Union

@dataclass(frozen=True)
class ProductionPlanEntry:
    """Expected production of one turbine in a production plan."""
    identifier: str
    expected_production: int  # MWh, 0 when offline

    def to_dict(self) -> Dict[str, Union[str, int]]:
        """Convert to the wire representation."""
        return {
            "identifier": self.identifier,
            "expectedProduction": self.expected_production,
        }

def total_production(plan: List[ProductionPlanEntry]) -> int:
    """Sum of expected production over a plan."""
    return sum(entry.expected_production for entry in plan)
