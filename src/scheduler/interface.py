from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Protocol, Tuple


@dataclass(frozen=True)
class ElevatorSnapshot:
    """Lightweight view of an elevator for scheduling decisions."""

    elevator_id: int
    floor: int
    direction: int
    targets: Tuple[int, ...]

    @property
    def queue_size(self) -> int:
        return len(self.targets)

    def distance_to(self, floor: int) -> int:
        return abs(floor - self.floor)


@dataclass(frozen=True)
class PendingRequest:
    """Representation of an unassigned rider request for schedulers."""

    origin: int
    destination: int
    requested_at: int


@dataclass(frozen=True)
class Assignment:
    """A committed match of one pending request to one elevator."""

    request_index: int
    elevator_id: int
    targets: Tuple[int, int]
    score: int


class Scheduler(Protocol):
    """Strategy interface for assigning pending requests to elevators."""

    def select_calls(
        self,
        elevator_state: Iterable[ElevatorSnapshot],
        pending_requests: Iterable[PendingRequest],
    ) -> List[Assignment]:
        """
        Return one assignment per request that found an elevator.

        ``request_index`` refers to the position in ``pending_requests``.
        Requests without an assignment stay pending for the next tick.
        Implementations must be pure functions of their inputs.
        """
        ...
