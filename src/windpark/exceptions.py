"""Custom exceptions for the wind park."""

class WindParkError(Exception):
    """Base exception for wind park errors."""
    pass

class ValidationError(WindParkError):
    """Base exception for validation errors."""
    pass

class InvalidArgumentError(ValidationError):
    """Exception raised when a park setting is given an invalid value."""
    pass

class ValidationTypeError(InvalidArgumentError):
    """Exception raised for type validation errors."""
    pass

class TurbineError(WindParkError):
    """Exception raised for turbine-related errors."""
    pass

class TurbineNotFoundError(TurbineError):
    """Exception raised when a turbine is not found."""
    pass

class DuplicateTurbineError(TurbineError):
    """Exception raised when a turbine identifier is already registered."""
    pass

class ConfigurationError(WindParkError):
    """Exception raised for configuration errors."""
    pass

class PlanningError(WindParkError):
    """Exception raised for allocation planning errors."""
    pass
