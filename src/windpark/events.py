"""Event definitions for the wind park."""

from enum import Enum
from typing import Dict, Any, Optional
from dataclasses import dataclass, field
from datetime import datetime, timezone

class EventType(str, Enum):
    """Types of park events."""
    # Market events
    MARKET_PRICE_SET = "market_price_set"
    MARKET_PRICE_REJECTED = "market_price_rejected"

    # Target events
    PRODUCTION_TARGET_SET = "production_target_set"
    PRODUCTION_TARGET_REJECTED = "production_target_rejected"

    # Planning events
    PLAN_COMPUTED = "plan_computed"

def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

@dataclass
class ParkEvent:
    """Base event class."""
    type: EventType
    timestamp: datetime = field(default_factory=_utcnow)
    details: Optional[Dict[str, Any]] = None

@dataclass
class MarketEvent(ParkEvent):
    """Market price event."""
    market_price: int = 0
    previous_price: Optional[int] = None

@dataclass
class TargetEvent(ParkEvent):
    """Production target event."""
    production_target: int = 0
    previous_target: Optional[int] = None
    max_capacity: Optional[int] = None

@dataclass
class PlanEvent(ParkEvent):
    """Production plan event."""
    total_production: int = 0
    production_target: int = 0
    online_turbines: int = 0
