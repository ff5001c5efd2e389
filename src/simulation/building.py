from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .elevator import Elevator, ElevatorStatus
from .request import Request
from scheduler import Assignment, ElevatorSnapshot, PendingRequest, Scheduler, get_scheduler

logger = logging.getLogger(__name__)


@dataclass
class Building:
    """Container for the elevator fleet and the requests waiting for one."""

    num_floors: int
    elevators: List[Elevator] = field(default_factory=list)
    scheduler_name: str = "directional"
    scheduler_options: dict = field(default_factory=dict)
    pending_requests: List[Request] = field(default_factory=list)
    requests_assigned: int = 0
    scheduler: Scheduler = field(init=False)

    def __post_init__(self) -> None:
        if not self.elevators:
            raise ValueError("A building needs at least one elevator")
        self.scheduler = get_scheduler(self.scheduler_name, **self.scheduler_options)

    def dispatch(self, current_time: int) -> List[Assignment]:
        if not self.pending_requests:
            return []
        requests = self._collect_pending_requests()
        snapshots = self._snapshot_elevators()
        assignments = self.scheduler.select_calls(snapshots, requests)

        assigned = set()
        for assignment in assignments:
            elevator = self._get_elevator(assignment.elevator_id)
            if elevator is None:
                continue
            for target in assignment.targets:
                elevator.add_target(target)
            assigned.add(assignment.request_index)
            self.requests_assigned += 1
            logger.debug(
                "t=%s assigned %s to elevator %s (score %s)",
                current_time,
                assignment.targets,
                assignment.elevator_id,
                assignment.score,
            )

        self.pending_requests = [
            request for index, request in enumerate(self.pending_requests) if index not in assigned
        ]
        if self.pending_requests:
            logger.warning(
                "t=%s %s request(s) left pending for the next tick",
                current_time,
                len(self.pending_requests),
            )
        return [a for a in assignments if a.request_index in assigned]

    def snapshot(self) -> List[ElevatorStatus]:
        return [elevator.status() for elevator in self.elevators]

    def _collect_pending_requests(self) -> List[PendingRequest]:
        return [
            PendingRequest(
                origin=request.origin,
                destination=request.destination,
                requested_at=request.requested_at,
            )
            for request in self.pending_requests
        ]

    def _snapshot_elevators(self) -> List[ElevatorSnapshot]:
        return [
            ElevatorSnapshot(
                elevator_id=elevator.elevator_id,
                floor=elevator.current_floor,
                direction=elevator.direction.value,
                targets=tuple(elevator.targets),
            )
            for elevator in self.elevators
        ]

    def _get_elevator(self, elevator_id: int) -> Optional[Elevator]:
        for elevator in self.elevators:
            if elevator.elevator_id == elevator_id:
                return elevator
        return None
