"""Simulation primitives for LiftStep."""

from .building import Building
from .config import SimulationConfig
from .direction import Direction
from .elevator import Elevator, ElevatorStatus
from .errors import InvalidFloor, InvalidRequest, TrivialRequest
from .request import Request, validate_request
from .simulation import Simulation, SimulationSummary, TickSnapshot
from .tick_log import TickLogWriter

__all__ = [
    "Building",
    "Direction",
    "Elevator",
    "ElevatorStatus",
    "InvalidFloor",
    "InvalidRequest",
    "Request",
    "Simulation",
    "SimulationConfig",
    "SimulationSummary",
    "TickLogWriter",
    "TickSnapshot",
    "TrivialRequest",
    "validate_request",
]
