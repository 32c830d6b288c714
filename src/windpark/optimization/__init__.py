"""
Allocation planners for the wind park.

The merit-order planner is the default and reproduces the park's dispatch
rules exactly. The MILP planner is an optional exact alternative.
"""

from .base import (
    AllocationProblem,
    AllocationResult,
    AllocationPlanner,
    assemble_plan
)

from .merit_order import (
    MeritOrderPlanner,
    compute_production_plan,
    merit_order,
    select_online_turbines
)

from .milp import MinimumCostMILPPlanner

from ..exceptions import PlanningError

__all__ = [
    "AllocationProblem",
    "AllocationResult",
    "AllocationPlanner",
    "assemble_plan",
    "MeritOrderPlanner",
    "compute_production_plan",
    "merit_order",
    "select_online_turbines",
    "MinimumCostMILPPlanner",
    "get_planner",
    "available_planners",
]

_PLANNERS = {
    "merit_order": MeritOrderPlanner,
    "milp": MinimumCostMILPPlanner,
}


def available_planners() -> list:
    """Names accepted by :func:`get_planner`."""
    return list(_PLANNERS)


def get_planner(name: str, **kwargs) -> AllocationPlanner:
    """Factory function to create an allocation planner."""
    if name not in _PLANNERS:
        raise PlanningError(f"Unknown planning strategy: {name}")

    return _PLANNERS[name](**kwargs)
