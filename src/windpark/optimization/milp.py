"""
Exact allocation with mixed-integer linear programming.

Chooses the subset of profitable turbines with the highest total production
not exceeding the target. Among equal production the cheaper subset wins,
then the one using earlier registry positions.
"""

from typing import List

from pulp import (
    LpProblem, LpMaximize, LpVariable, lpSum, LpStatus, LpBinary, PULP_CBC_CMD
)

from ..exceptions import PlanningError
from .base import AllocationPlanner, AllocationProblem


class MinimumCostMILPPlanner(AllocationPlanner):
    """Knapsack planner solved with PuLP/CBC."""

    def __init__(self, time_limit: int = 30, messages: bool = False):
        super().__init__("milp")
        self.time_limit = time_limit
        self.messages = messages

    def select(self, problem: AllocationProblem) -> List[int]:
        turbines = problem.turbines
        candidates = problem.profitable_indices()
        if not candidates or problem.production_target == 0:
            return []

        # Lexicographic weights: production, then cost, then registry position.
        # Every chosen turbine costs at least 1 so idle zero-capacity turbines stay off.
        n = len(turbines)
        index_weight = n * n + 1
        total_cost = sum(turbines[i].capacity * turbines[i].production_cost for i in candidates)
        production_weight = index_weight * (total_cost + 1)

        prob = LpProblem("wind_park_allocation", LpMaximize)
        online = {i: LpVariable(f"online_{i}", cat=LpBinary) for i in candidates}

        prob += lpSum(
            online[i] * (
                production_weight * turbines[i].capacity
                - index_weight * turbines[i].capacity * turbines[i].production_cost
                - (i + 1)
            )
            for i in candidates
        )
        prob += lpSum(online[i] * turbines[i].capacity for i in candidates) <= problem.production_target

        prob.solve(PULP_CBC_CMD(msg=self.messages, timeLimit=self.time_limit))

        status = LpStatus[prob.status]
        if status != "Optimal":
            self.logger.error(f"MILP allocation failed with solver status: {status}")
            raise PlanningError(f"Solver status: {status}")

        selected = [i for i in candidates if (online[i].value() or 0) > 0.5]
        return sorted(selected, key=lambda i: (turbines[i].production_cost, i))
