"""
Test suite for the allocation planners.

This test suite validates:
- The reference dispatch scenario
- Profitability filter and stable cost ordering
- Stop-on-overshoot selection
- Plan completeness, capacity bound and determinism over random fleets
- The exact MILP planner
"""

import random
import unittest

from windpark.exceptions import PlanningError, TurbineError
from windpark.models import total_production
from windpark.optimization import (
    AllocationProblem, MeritOrderPlanner, MinimumCostMILPPlanner,
    available_planners, compute_production_plan, get_planner, merit_order
)
from windpark.turbines import MAX_TURBINE_VALUE, WindTurbine


def sample_fleet():
    return [
        WindTurbine("A", 2, 15),
        WindTurbine("B", 2, 5),
        WindTurbine("C", 6, 5),
        WindTurbine("D", 6, 5),
        WindTurbine("E", 5, 3),
    ]


def as_mapping(plan):
    return {entry.identifier: entry.expected_production for entry in plan}


class TestMeritOrderPlanner(unittest.TestCase):
    """Tests for the default merit-order planner."""

    def setUp(self):
        self.fleet = sample_fleet()

    def test_reference_scenario(self):
        plan = compute_production_plan(self.fleet, market_price=6, production_target=10)

        self.assertEqual([e.identifier for e in plan], ["A", "B", "C", "D", "E"])
        self.assertEqual(as_mapping(plan), {"A": 0, "B": 2, "C": 0, "D": 0, "E": 5})

    def test_merit_order_is_cheapest_first_and_stable(self):
        order = merit_order(self.fleet, market_price=6)
        self.assertEqual([self.fleet[i].identifier for i in order], ["E", "B", "C", "D"])

    def test_cost_equal_to_price_is_excluded(self):
        order = merit_order(self.fleet, market_price=5)
        self.assertEqual([self.fleet[i].identifier for i in order], ["E"])

        plan = compute_production_plan(self.fleet, market_price=5, production_target=21)
        self.assertEqual(as_mapping(plan), {"A": 0, "B": 0, "C": 0, "D": 0, "E": 5})

    def test_zero_target_gives_all_zero_plan(self):
        for price in [0, 6, 100]:
            plan = compute_production_plan(self.fleet, market_price=price, production_target=0)
            self.assertEqual(len(plan), 5)
            self.assertTrue(all(e.expected_production == 0 for e in plan))

    def test_no_profitable_turbines_gives_all_zero_plan(self):
        for price in [0, 1, 3]:
            for target in [0, 10, 21]:
                plan = compute_production_plan(self.fleet, market_price=price, production_target=target)
                self.assertEqual(total_production(plan), 0)

    def test_empty_registry(self):
        self.assertEqual(compute_production_plan([], market_price=10, production_target=0), [])

    def test_stops_at_first_overshoot(self):
        fleet = [
            WindTurbine("X", 5, 1),
            WindTurbine("Y", 4, 2),
            WindTurbine("Z", 1, 3),
        ]
        plan = compute_production_plan(fleet, market_price=10, production_target=6)

        # Z would close the gap but selection stopped at Y
        self.assertEqual(as_mapping(plan), {"X": 5, "Y": 0, "Z": 0})

    def test_exact_fit_is_accepted(self):
        plan = compute_production_plan(self.fleet, market_price=16, production_target=21)
        self.assertEqual(total_production(plan), 21)

    def test_ties_follow_registry_order(self):
        fleet = [WindTurbine("P", 3, 2), WindTurbine("Q", 3, 2)]

        plan = compute_production_plan(fleet, market_price=5, production_target=3)
        self.assertEqual(as_mapping(plan), {"P": 3, "Q": 0})

        plan = compute_production_plan(list(reversed(fleet)), market_price=5, production_target=3)
        self.assertEqual([e.identifier for e in plan], ["Q", "P"])
        self.assertEqual(as_mapping(plan), {"P": 0, "Q": 3})

    def test_plan_properties_over_random_fleets(self):
        rng = random.Random(1234)

        for _ in range(200):
            size = rng.randint(0, 12)
            fleet = [
                WindTurbine(f"T{i:02d}", rng.randint(0, 8), rng.randint(0, 10))
                for i in range(size)
            ]
            capacity = sum(t.capacity for t in fleet)
            price = rng.randint(0, 12)
            target = rng.randint(0, capacity)

            plan = compute_production_plan(fleet, price, target)

            self.assertEqual([e.identifier for e in plan], [t.identifier for t in fleet])
            self.assertLessEqual(total_production(plan), target)
            for turbine, entry in zip(fleet, plan):
                self.assertIn(entry.expected_production, (0, turbine.capacity))
                if entry.expected_production > 0:
                    self.assertLess(turbine.production_cost, price)
            self.assertEqual(plan, compute_production_plan(list(fleet), price, target))

    def test_largest_allowed_cost_is_planned(self):
        fleet = [WindTurbine("A", 2, MAX_TURBINE_VALUE), WindTurbine("B", 3, 1)]

        plan = compute_production_plan(fleet, market_price=5, production_target=3)
        self.assertEqual(as_mapping(plan), {"A": 0, "B": 3})

        plan = compute_production_plan(fleet, market_price=2**64, production_target=5)
        self.assertEqual(as_mapping(plan), {"A": 2, "B": 3})

    def test_costs_beyond_planning_range_are_rejected(self):
        with self.assertRaises(TurbineError):
            WindTurbine("A", 2, MAX_TURBINE_VALUE + 1)
        with self.assertRaises(TurbineError):
            WindTurbine("A", 2**63, 1)

    def test_planner_result(self):
        planner = MeritOrderPlanner()
        result = planner.plan(AllocationProblem(self.fleet, market_price=6, production_target=10))

        self.assertEqual(result.online, ["E", "B"])
        self.assertEqual(result.total_production, 7)
        self.assertEqual(result.total_cost, 5 * 3 + 2 * 5)
        self.assertEqual(result.shortfall, 3)
        self.assertEqual(result.planner, "merit_order")
        self.assertEqual(planner.get_metadata()["solve_count"], 1)


class TestMILPPlanner(unittest.TestCase):
    """Tests for the exact MILP planner."""

    def setUp(self):
        self.planner = MinimumCostMILPPlanner(time_limit=10)

    def plan(self, fleet, price, target):
        return self.planner.plan(AllocationProblem(fleet, price, target))

    def test_maximizes_production_within_target(self):
        result = self.plan(sample_fleet(), 6, 10)

        # B+C and B+D both reach 8 at equal cost; C comes first in the registry
        self.assertEqual(as_mapping(result.plan), {"A": 0, "B": 2, "C": 6, "D": 0, "E": 0})
        self.assertEqual(result.total_production, 8)
        self.assertEqual(result.online, ["B", "C"])

    def test_prefers_cheaper_subset(self):
        fleet = [WindTurbine("X", 4, 3), WindTurbine("Y", 4, 1)]
        result = self.plan(fleet, 5, 4)
        self.assertEqual(result.online, ["Y"])

    def test_respects_profitability(self):
        result = self.plan(sample_fleet(), 5, 21)
        self.assertEqual(result.online, ["E"])

    def test_zero_capacity_turbine_stays_offline(self):
        fleet = [WindTurbine("Z", 0, 1), WindTurbine("X", 3, 1)]
        result = self.plan(fleet, 5, 3)

        self.assertEqual(result.online, ["X"])
        self.assertEqual(as_mapping(result.plan), {"Z": 0, "X": 3})

    def test_trivial_problems(self):
        self.assertEqual(self.plan(sample_fleet(), 6, 0).total_production, 0)
        self.assertEqual(self.plan(sample_fleet(), 0, 21).total_production, 0)
        self.assertEqual(self.plan([], 10, 0).plan, [])


class TestPlannerFactory(unittest.TestCase):
    """Tests for planner creation by name."""

    def test_known_planners(self):
        self.assertEqual(available_planners(), ["merit_order", "milp"])
        self.assertIsInstance(get_planner("merit_order"), MeritOrderPlanner)

        planner = get_planner("milp", time_limit=5)
        self.assertIsInstance(planner, MinimumCostMILPPlanner)
        self.assertEqual(planner.time_limit, 5)

    def test_unknown_planner(self):
        with self.assertRaises(PlanningError):
            get_planner("best_fit")


if __name__ == "__main__":
    unittest.main()
