"""
Merit-order allocation: run the cheapest profitable turbines first until the
next one would overshoot the production target.
"""

from typing import List

import numpy as np

from ..models import ProductionPlanEntry
from ..turbines import MAX_TURBINE_VALUE, WindTurbine
from .base import AllocationPlanner, AllocationProblem, assemble_plan


def merit_order(turbines: List[WindTurbine], market_price: int) -> List[int]:
    """Registry positions of profitable turbines, cheapest first.

    Turbines with equal cost keep their registry order.
    """
    costs = np.array([t.production_cost for t in turbines], dtype=np.int64)
    if market_price > MAX_TURBINE_VALUE:
        # every cost is below a price outside the int64 range
        eligible = np.arange(len(costs))
    else:
        eligible = np.flatnonzero(costs < market_price)
    order = np.argsort(costs[eligible], kind="stable")
    return [int(i) for i in eligible[order]]


def select_online_turbines(turbines: List[WindTurbine], order: List[int],
                           production_target: int) -> List[int]:
    """Take turbines in order while their full capacity still fits.

    Selection stops at the first turbine that would overshoot the target;
    smaller turbines further down the order are not considered.
    """
    remaining = production_target
    selected = []

    for i in order:
        capacity = turbines[i].capacity
        if remaining - capacity < 0:
            break
        selected.append(i)
        remaining -= capacity

    return selected


def compute_production_plan(turbines: List[WindTurbine], market_price: int,
                            production_target: int) -> List[ProductionPlanEntry]:
    """Compute the merit-order production plan for a fleet."""
    order = merit_order(turbines, market_price)
    selected = select_online_turbines(turbines, order, production_target)
    return assemble_plan(turbines, selected)


class MeritOrderPlanner(AllocationPlanner):
    """Greedy cheapest-first planner with stop-on-overshoot."""

    def __init__(self):
        super().__init__("merit_order")

    def select(self, problem: AllocationProblem) -> List[int]:
        order = merit_order(problem.turbines, problem.market_price)
        return select_online_turbines(problem.turbines, order, problem.production_target)
