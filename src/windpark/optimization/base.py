"""
Base classes for allocation planners.
Planners decide which turbines run; plan assembly is shared.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List
import logging
import time

from ..models import ProductionPlanEntry
from ..turbines import WindTurbine


@dataclass
class AllocationProblem:
    """Snapshot of the fleet and market the plan is computed for."""
    turbines: List[WindTurbine]
    market_price: int
    production_target: int

    def profitable_indices(self) -> List[int]:
        """Registry positions of turbines cheaper than the market price."""
        return [
            i for i, turbine in enumerate(self.turbines)
            if turbine.is_profitable(self.market_price)
        ]


@dataclass
class AllocationResult:
    """Result of an allocation run."""
    plan: List[ProductionPlanEntry]
    online: List[str]
    total_production: int
    total_cost: int
    market_price: int
    production_target: int
    planner: str
    solve_time: float
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def shortfall(self) -> int:
        """Production still missing to reach the target."""
        return self.production_target - self.total_production


def assemble_plan(turbines: List[WindTurbine], selected: List[int]) -> List[ProductionPlanEntry]:
    """Build one plan entry per turbine in registry order."""
    online = set(selected)
    return [
        ProductionPlanEntry(
            identifier=turbine.identifier,
            expected_production=turbine.capacity if i in online else 0
        )
        for i, turbine in enumerate(turbines)
    ]


class AllocationPlanner(ABC):
    """Base class for allocation planners."""

    def __init__(self, name: str):
        self.name = name
        self.logger = logging.getLogger(f"planning.{name}")
        self._solve_count = 0
        self._last_solve_time = 0.0

    @abstractmethod
    def select(self, problem: AllocationProblem) -> List[int]:
        """Return registry positions of the turbines to run, in dispatch order."""
        pass

    def plan(self, problem: AllocationProblem) -> AllocationResult:
        """Compute the production plan for a problem."""
        start_time = time.time()

        selected = self.select(problem)
        plan = assemble_plan(problem.turbines, selected)

        solve_time = time.time() - start_time
        self._solve_count += 1
        self._last_solve_time = solve_time

        chosen = [problem.turbines[i] for i in selected]
        result = AllocationResult(
            plan=plan,
            online=[t.identifier for t in chosen],
            total_production=sum(t.capacity for t in chosen),
            total_cost=sum(t.capacity * t.production_cost for t in chosen),
            market_price=problem.market_price,
            production_target=problem.production_target,
            planner=self.name,
            solve_time=solve_time
        )
        self.logger.debug(
            f"Planned {result.total_production}/{problem.production_target} MWh "
            f"with {len(chosen)} turbines in {solve_time * 1000:.2f}ms"
        )
        return result

    def get_metadata(self) -> Dict[str, Any]:
        """Return planner information for logging/debugging."""
        return {
            "name": self.name,
            "solve_count": self._solve_count,
            "last_solve_time": self._last_solve_time
        }
