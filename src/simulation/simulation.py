from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List

from .building import Building
from .config import SimulationConfig
from .elevator import Elevator, ElevatorStatus
from .errors import InvalidRequest
from .request import Request, validate_request

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TickSnapshot:
    time_step: int
    elevators: List[ElevatorStatus]
    pending_requests: int
    requests_assigned: int


@dataclass(frozen=True)
class SimulationSummary:
    total_ticks: int
    requests_assigned: int
    stops_served: Dict[int, int]


class Simulation:
    """Discrete-time clock driving dispatch and elevator motion.

    One :meth:`step` is atomic: the clock advances, every pending request
    is offered to the scheduler, each elevator advances once in fleet
    order and finally a ``"tick"`` event carries the resulting snapshot
    to any subscribed consumers.
    """

    def __init__(self, building: Building) -> None:
        self.building = building
        self.current_time: int = 0
        self.event_hooks: Dict[str, List[Callable[[object], None]]] = {}

    @classmethod
    def from_config(cls, config: SimulationConfig) -> "Simulation":
        elevators = [Elevator(i) for i in range(config.elevator_count)]
        building = Building(
            num_floors=config.num_floors,
            elevators=elevators,
            scheduler_name=config.scheduler_name,
            scheduler_options=config.scheduler_options,
        )
        return cls(building)

    @property
    def num_floors(self) -> int:
        return self.building.num_floors

    def add_request(self, origin: int, destination: int) -> Request:
        try:
            validate_request(origin, destination, self.building.num_floors)
        except InvalidRequest as exc:
            logger.warning("Rejected request %s -> %s: %s", origin, destination, exc)
            raise
        request = Request(origin=origin, destination=destination, requested_at=self.current_time)
        self.building.pending_requests.append(request)
        logger.info("Request added from floor %s to floor %s", origin, destination)
        self._emit("request", request)
        return request

    def run(self, duration: int) -> None:
        for _ in range(duration):
            self.step()

    def step(self) -> TickSnapshot:
        self.current_time += 1
        for assignment in self.building.dispatch(self.current_time):
            self._emit("assignment", assignment)
        for elevator in self.building.elevators:
            elevator.step()

        snapshot = self.snapshot()
        self._emit("tick", snapshot)
        return snapshot

    def snapshot(self) -> TickSnapshot:
        return TickSnapshot(
            time_step=self.current_time,
            elevators=self.building.snapshot(),
            pending_requests=len(self.building.pending_requests),
            requests_assigned=self.building.requests_assigned,
        )

    def summary(self) -> SimulationSummary:
        return SimulationSummary(
            total_ticks=self.current_time,
            requests_assigned=self.building.requests_assigned,
            stops_served={e.elevator_id: e.total_stops_served for e in self.building.elevators},
        )

    def on_event(self, event: str, callback: Callable[[object], None]) -> None:
        self.event_hooks.setdefault(event, []).append(callback)

    def _emit(self, event: str, payload: object) -> None:
        for callback in self.event_hooks.get(event, []):
            callback(payload)
