"""
Configuration package for the wind park.
Provides file-backed, hierarchical and validatable configuration management.
"""

from .base import (
    BaseConfig,
    ConfigFormat,
    ValidationLevel,
    ConfigValidationResult
)

from .park_config import (
    TurbineConfig,
    PlanningConfig,
    MonitoringConfig,
    ApiConfig,
    ParkConfig,
    SAMPLE_TURBINES
)

__all__ = [
    # Base configuration classes
    "BaseConfig",
    "ConfigFormat",
    "ValidationLevel",
    "ConfigValidationResult",

    # Park configuration components
    "TurbineConfig",
    "PlanningConfig",
    "MonitoringConfig",
    "ApiConfig",

    # Main configuration class
    "ParkConfig",
    "SAMPLE_TURBINES"
]
