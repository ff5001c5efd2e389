from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

MIN_FLOORS = 5
MAX_FLOORS = 20
DEFAULT_FLOORS = 10

MIN_ELEVATORS = 1
MAX_ELEVATORS = 5
DEFAULT_ELEVATORS = 2

DEFAULT_LOG_PATH = "elevator_log.txt"
DEFAULT_AUTO_RUN_STEPS = 5


def _bounded(name: str, value: Any, low: int, high: int, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        logger.warning("Invalid %s %r. Defaulting to %s.", name, value, default)
        return default
    if number < low or number > high:
        logger.warning("%s %s outside %s-%s. Defaulting to %s.", name, number, low, high, default)
        return default
    return number


@dataclass
class SimulationConfig:
    """Construction parameters for a simulation run."""

    num_floors: int = DEFAULT_FLOORS
    elevator_count: int = DEFAULT_ELEVATORS
    log_path: Optional[str] = DEFAULT_LOG_PATH
    auto_run_steps: int = DEFAULT_AUTO_RUN_STEPS
    scheduler_name: str = "directional"
    scheduler_options: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def resolve(
        cls,
        num_floors: Any = DEFAULT_FLOORS,
        elevator_count: Any = DEFAULT_ELEVATORS,
        **kwargs: Any,
    ) -> "SimulationConfig":
        """Build a config, replacing out-of-range sizes with the defaults."""

        return cls(
            num_floors=_bounded("floor count", num_floors, MIN_FLOORS, MAX_FLOORS, DEFAULT_FLOORS),
            elevator_count=_bounded(
                "elevator count", elevator_count, MIN_ELEVATORS, MAX_ELEVATORS, DEFAULT_ELEVATORS
            ),
            **kwargs,
        )

    @classmethod
    def from_env(cls) -> "SimulationConfig":
        log_path = os.getenv("LIFTSTEP_LOG", DEFAULT_LOG_PATH)
        return cls.resolve(
            num_floors=os.getenv("LIFTSTEP_FLOORS", DEFAULT_FLOORS),
            elevator_count=os.getenv("LIFTSTEP_ELEVATORS", DEFAULT_ELEVATORS),
            log_path=log_path or None,
        )
