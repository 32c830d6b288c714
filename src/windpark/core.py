"""Core wind park implementation."""

import logging
from typing import Any, Callable, Dict, List, Optional

from .config import ParkConfig, ValidationLevel
from .events import EventType, MarketEvent, ParkEvent, PlanEvent, TargetEvent
from .exceptions import InvalidArgumentError
from .models import ProductionPlanEntry, total_production
from .optimization import AllocationPlanner, AllocationProblem, AllocationResult, get_planner
from .registry import InMemoryTurbineRegistry, TurbineRegistry
from .state import ParkState

logger = logging.getLogger("windpark.core")

class WindPark:
    """Wind park service tying the turbine registry, park state and planner together.

    The park does not lock. Callers that share a park between threads must
    serialize calls, as the HTTP binding does.
    """

    def __init__(
        self,
        config: Optional[ParkConfig] = None,
        registry: Optional[TurbineRegistry] = None,
        planner: Optional[AllocationPlanner] = None
    ):
        """Initialize park with configuration."""
        self.config = config or ParkConfig()
        self._check_config()

        if registry is None:
            registry = InMemoryTurbineRegistry(self.config.build_turbines())
        elif self.config.turbines:
            logger.warning(
                f"Ignoring {len(self.config.turbines)} configured turbines: "
                f"using the provided {type(registry).__name__}"
            )
        self.registry = registry
        self.state = ParkState()
        self.planner = planner or get_planner(
            self.config.planning.strategy, **self.config.planning.planner_options()
        )
        self._event_history: List[ParkEvent] = []
        self.last_result: Optional[AllocationResult] = None

    def _check_config(self) -> None:
        """Validate configuration according to its validation level."""
        level = self.config.validation_level
        if level == ValidationLevel.PERMISSIVE:
            return

        result = self.config.validate()
        for warning in result.warnings:
            logger.warning(f"Configuration warning: {warning}")

        if not result.is_valid:
            if level == ValidationLevel.STRICT:
                result.raise_for_errors()
            for error in result.errors:
                logger.warning(f"Configuration error ignored: {error}")

    @property
    def maximum_capacity(self) -> int:
        """Total capacity of the fleet, recomputed on every access."""
        return self.registry.total_capacity()

    def get_market_price(self) -> int:
        """Get the market price."""
        return self.state.get_market_price()

    def set_market_price(self, price: int) -> None:
        """Set the market price (€/MWh)."""
        previous = self.state.get_market_price()
        try:
            self.state.set_market_price(price)
        except InvalidArgumentError as e:
            logger.warning(f"Rejected market price {price}: {e}")
            self._record_event(MarketEvent(
                type=EventType.MARKET_PRICE_REJECTED,
                market_price=previous,
                details={"requested": price, "error": str(e)}
            ))
            raise

        logger.info(f"Successfully set market price to {price}€")
        self._record_event(MarketEvent(
            type=EventType.MARKET_PRICE_SET,
            market_price=price,
            previous_price=previous
        ))

    def get_production_target(self) -> int:
        """Get the production target."""
        return self.state.get_production_target()

    def set_production_target(self, target: int) -> None:
        """Set the production target (MWh) within the fleet capacity."""
        self._change_target(lambda cap: self.state.set_production_target(target, cap),
                            {"requested": target})

    def update_production_target(self, delta: int) -> None:
        """Increase or decrease the production target by ``delta`` MWh."""
        self._change_target(lambda cap: self.state.update_production_target(delta, cap),
                            {"delta": delta})

    def _change_target(self, apply: Callable[[int], None], details: Dict[str, Any]) -> None:
        """Apply a target change against the live capacity and record the outcome."""
        previous = self.state.get_production_target()
        max_capacity = self.maximum_capacity
        try:
            apply(max_capacity)
        except InvalidArgumentError as e:
            logger.warning(f"Rejected production target change {details}: {e}")
            self._record_event(TargetEvent(
                type=EventType.PRODUCTION_TARGET_REJECTED,
                production_target=previous,
                max_capacity=max_capacity,
                details={**details, "error": str(e)}
            ))
            raise

        target = self.state.get_production_target()
        logger.info(f"Successfully updated production target to {target}MWh")
        self._record_event(TargetEvent(
            type=EventType.PRODUCTION_TARGET_SET,
            production_target=target,
            previous_target=previous,
            max_capacity=max_capacity,
            details=details
        ))

    def allocate(self) -> AllocationResult:
        """Run the planner over the current fleet and market state."""
        problem = AllocationProblem(
            turbines=self.registry.list_all_turbines(),
            market_price=self.state.get_market_price(),
            production_target=self.state.get_production_target()
        )
        result = self.planner.plan(problem)
        self.last_result = result

        self._record_event(PlanEvent(
            type=EventType.PLAN_COMPUTED,
            total_production=result.total_production,
            production_target=result.production_target,
            online_turbines=len(result.online),
            details={"planner": result.planner, "market_price": result.market_price}
        ))
        return result

    def compute_production_plan(self) -> List[ProductionPlanEntry]:
        """Compute the production plan for every turbine in the park."""
        plan = self.allocate().plan
        logger.info(
            f"Successfully computed the production plan \n{self.format_production_plan(plan)}"
        )
        return plan

    def format_production_plan(self, plan: List[ProductionPlanEntry]) -> str:
        """Render a plan as an operator table."""
        lines = [
            "---------------------------------",
            "| Turbine | Expected production |",
            "---------------------------------",
        ]
        for entry in plan:
            lines.append(f"| {entry.identifier:<7} | {entry.expected_production:<19d} |")
        lines.append("---------------------------------")
        lines.append(
            f"Sum production: {total_production(plan)}MWh. "
            f"Target production: {self.get_production_target()}MWh. "
            f"Price limit: {self.get_market_price()}€."
        )
        return "\n".join(lines)

    def _record_event(self, event: ParkEvent) -> None:
        """Record event, keeping the configured history size."""
        self._event_history.append(event)
        max_history = self.config.monitoring.max_event_history
        if len(self._event_history) > max_history:
            self._event_history = self._event_history[-max_history:]

    def get_event_history(self) -> List[ParkEvent]:
        """Get recorded park events, oldest first."""
        return list(self._event_history)
