"""
Main wind park configuration class that integrates all configuration components.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, ClassVar, Optional, List
import logging
import os

from .base import BaseConfig, ConfigValidationResult, ValidationLevel
from ..turbines import MAX_TURBINE_VALUE, WindTurbine


@dataclass
class TurbineConfig:
    """Configuration for an individual turbine."""
    identifier: str
    capacity: int
    production_cost: int

    def validate(self) -> ConfigValidationResult:
        """Validate turbine configuration."""
        result = ConfigValidationResult(is_valid=True)

        if not self.identifier:
            result.add_error("Turbine identifier cannot be empty")

        for name in ("capacity", "production_cost"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                result.add_error(f"Turbine {name} must be an integer, got {value!r}")
            elif value < 0:
                result.add_error(f"Turbine {name} must be >= 0, got {value}")
            elif value > MAX_TURBINE_VALUE:
                result.add_error(f"Turbine {name} must be <= {MAX_TURBINE_VALUE}, got {value}")

        if isinstance(self.capacity, int) and self.capacity == 0:
            result.add_warning(f"Turbine '{self.identifier}' has zero capacity")

        return result

    def to_turbine(self) -> WindTurbine:
        """Create the turbine described by this configuration."""
        return WindTurbine(
            identifier=self.identifier,
            capacity=self.capacity,
            production_cost=self.production_cost
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "identifier": self.identifier,
            "capacity": self.capacity,
            "production_cost": self.production_cost
        }


@dataclass
class PlanningConfig:
    """Configuration for the allocation planner."""
    strategy: str = "merit_order"
    solver_time_limit: int = 30  # seconds, MILP only
    solver_messages: bool = False

    def validate(self) -> ConfigValidationResult:
        """Validate planning configuration."""
        from ..optimization import available_planners

        result = ConfigValidationResult(is_valid=True)

        if self.strategy not in available_planners():
            result.add_error(f"Invalid planning strategy: {self.strategy}")

        if self.solver_time_limit <= 0:
            result.add_error(f"Solver time limit must be > 0, got {self.solver_time_limit}")

        return result

    def planner_options(self) -> Dict[str, Any]:
        """Keyword arguments for the configured planner."""
        if self.strategy == "milp":
            return {"time_limit": self.solver_time_limit, "messages": self.solver_messages}
        return {}


@dataclass
class MonitoringConfig:
    """Configuration for logging and event history."""
    log_level: str = "INFO"
    log_file: Optional[str] = None
    max_event_history: int = 1000

    def validate(self) -> ConfigValidationResult:
        """Validate monitoring configuration."""
        result = ConfigValidationResult(is_valid=True)

        valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.log_level not in valid_log_levels:
            result.add_error(f"Invalid log level: {self.log_level}")

        if self.max_event_history <= 0:
            result.add_error(f"Max event history must be > 0, got {self.max_event_history}")

        return result


@dataclass
class ApiConfig:
    """Configuration for the HTTP binding."""
    host: str = "127.0.0.1"
    port: int = 8080
    prefix: str = "/api"

    def validate(self) -> ConfigValidationResult:
        """Validate API configuration."""
        result = ConfigValidationResult(is_valid=True)

        if not self.host:
            result.add_error("Host cannot be empty")

        if self.port < 1 or self.port > 65535:
            result.add_error(f"Invalid port: {self.port}")

        if self.prefix and (not self.prefix.startswith("/") or self.prefix.endswith("/")):
            result.add_error(f"Prefix must start and not end with '/', got {self.prefix!r}")

        return result


SAMPLE_TURBINES = [
    ("A", 2, 15),
    ("B", 2, 5),
    ("C", 6, 5),
    ("D", 6, 5),
    ("E", 5, 3),
]


@dataclass
class ParkConfig(BaseConfig):
    """Main wind park configuration class."""

    merge_keys: ClassVar[Dict[str, str]] = {"turbines": "identifier"}

    # Basic settings
    name: str = "Wind Park"
    description: str = ""

    # Component configurations
    planning: PlanningConfig = field(default_factory=PlanningConfig)
    monitoring: MonitoringConfig = field(default_factory=MonitoringConfig)
    api: ApiConfig = field(default_factory=ApiConfig)

    # Fleet loaded into the in-memory registry
    turbines: List[TurbineConfig] = field(default_factory=list)

    validation_level: ValidationLevel = ValidationLevel.STRICT
    config_version: str = "1.0"

    def __post_init__(self):
        """Initialize after dataclass creation."""
        super().__init__(self.validation_level)
        self._setup_logging()

    @classmethod
    def with_sample_turbines(cls, **kwargs) -> 'ParkConfig':
        """Configuration preloaded with the five sample turbines A-E."""
        config = cls(**kwargs)
        for identifier, capacity, production_cost in SAMPLE_TURBINES:
            config.add_turbine(identifier, capacity, production_cost)
        return config

    def _setup_logging(self):
        """Setup logging based on monitoring configuration."""
        logger = logging.getLogger("windpark")
        level = getattr(logging, self.monitoring.log_level, None)
        if isinstance(level, int):
            logger.setLevel(level)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        # Console handler
        if not logger.handlers:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

        # File handler if specified
        if self.monitoring.log_file:
            existing = [
                h for h in logger.handlers
                if isinstance(h, logging.FileHandler)
                and h.baseFilename == os.path.abspath(self.monitoring.log_file)
            ]
            if not existing:
                file_handler = logging.FileHandler(self.monitoring.log_file)
                file_handler.setFormatter(formatter)
                logger.addHandler(file_handler)

    def validate(self) -> ConfigValidationResult:
        """Validate the entire park configuration."""
        result = ConfigValidationResult(is_valid=True)

        if not self.name:
            result.add_error("Park name cannot be empty")

        components = [
            ("planning", self.planning),
            ("monitoring", self.monitoring),
            ("api", self.api)
        ]

        for component_name, component in components:
            result.extend(component.validate(), prefix=f"{component_name}: ")

        # Validate turbines
        identifiers = set()
        for turbine in self.turbines:
            if turbine.identifier in identifiers:
                result.add_error(f"Duplicate turbine identifier: {turbine.identifier}")
            identifiers.add(turbine.identifier)

            result.extend(turbine.validate(), prefix=f"turbine '{turbine.identifier}': ")

        if not self.turbines:
            result.add_warning("No turbines configured")

        return result

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "name": self.name,
            "description": self.description,
            "planning": {
                "strategy": self.planning.strategy,
                "solver_time_limit": self.planning.solver_time_limit,
                "solver_messages": self.planning.solver_messages
            },
            "monitoring": {
                "log_level": self.monitoring.log_level,
                "log_file": self.monitoring.log_file,
                "max_event_history": self.monitoring.max_event_history
            },
            "api": {
                "host": self.api.host,
                "port": self.api.port,
                "prefix": self.api.prefix
            },
            "turbines": [turbine.to_dict() for turbine in self.turbines],
            "validation_level": self.validation_level.value,
            "config_version": self.config_version
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ParkConfig':
        """Create configuration from dictionary."""
        planning_data = data.get("planning", {})
        planning = PlanningConfig(
            strategy=planning_data.get("strategy", "merit_order"),
            solver_time_limit=planning_data.get("solver_time_limit", 30),
            solver_messages=planning_data.get("solver_messages", False)
        )

        monitoring_data = data.get("monitoring", {})
        monitoring = MonitoringConfig(
            log_level=monitoring_data.get("log_level", "INFO"),
            log_file=monitoring_data.get("log_file"),
            max_event_history=monitoring_data.get("max_event_history", 1000)
        )

        api_data = data.get("api", {})
        api = ApiConfig(
            host=api_data.get("host", "127.0.0.1"),
            port=api_data.get("port", 8080),
            prefix=api_data.get("prefix", "/api")
        )

        turbines = [
            TurbineConfig(
                identifier=turbine_data["identifier"],
                capacity=turbine_data["capacity"],
                production_cost=turbine_data["production_cost"]
            )
            for turbine_data in data.get("turbines", [])
        ]

        return cls(
            name=data.get("name", "Wind Park"),
            description=data.get("description", ""),
            planning=planning,
            monitoring=monitoring,
            api=api,
            turbines=turbines,
            validation_level=ValidationLevel(data.get("validation_level", "strict")),
            config_version=data.get("config_version", "1.0")
        )

    def add_turbine(self, identifier: str, capacity: int, production_cost: int) -> None:
        """Add a turbine to the configuration."""
        self.turbines.append(
            TurbineConfig(identifier=identifier, capacity=capacity, production_cost=production_cost)
        )

    def remove_turbine(self, identifier: str) -> bool:
        """Remove a turbine from the configuration."""
        for i, turbine in enumerate(self.turbines):
            if turbine.identifier == identifier:
                del self.turbines[i]
                return True
        return False

    def get_turbine(self, identifier: str) -> Optional[TurbineConfig]:
        """Get a turbine configuration by identifier."""
        for turbine in self.turbines:
            if turbine.identifier == identifier:
                return turbine
        return None

    def build_turbines(self) -> List[WindTurbine]:
        """Create the configured turbines in configuration order."""
        return [turbine.to_turbine() for turbine in self.turbines]

    def validate_and_log(self) -> bool:
        """Validate configuration and log results."""
        result = self.validate()

        logger = logging.getLogger("windpark.config")

        if result.is_valid:
            logger.info("Configuration validation passed")
        else:
            logger.error("Configuration validation failed")
            for error in result.errors:
                logger.error(f"Validation error: {error}")

        for warning in result.warnings:
            logger.warning(f"Validation warning: {warning}")

        return result.is_valid
