"""Wind park production planning library initialization."""

from .core import WindPark
from .config import ParkConfig
from .exceptions import WindParkError, InvalidArgumentError
from .models import ProductionPlanEntry
from .registry import TurbineRegistry, InMemoryTurbineRegistry
from .state import ParkState
from .turbines import WindTurbine

from . import optimization

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    "WindPark",
    "ParkConfig",
    "WindParkError",
    "InvalidArgumentError",
    "ProductionPlanEntry",
    "TurbineRegistry",
    "InMemoryTurbineRegistry",
    "ParkState",
    "WindTurbine",
    "optimization"
]
