from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque

from .direction import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ElevatorStatus:
    """Read-only view of an elevator at the end of a tick."""

    elevator_id: int
    floor: int
    direction: Direction
    door_open: bool
    queue_size: int
    stops_served: int

    @property
    def door_label(self) -> str:
        return "Open" if self.door_open else "Closed"


@dataclass
class Elevator:
    """A single car that visits its target floors in commit order.

    Each call to :meth:`step` performs at most one of: closing the door
    (completing a stop), settling to idle, moving one floor, or opening
    the door on arrival. Arrival and departure therefore take two ticks.
    """

    elevator_id: int
    current_floor: int = 0
    direction: Direction = Direction.IDLE
    door_open: bool = False
    targets: Deque[int] = field(default_factory=deque)
    total_stops_served: int = 0

    @property
    def queue_size(self) -> int:
        return len(self.targets)

    def add_target(self, floor: int) -> None:
        if self.targets and self.targets[-1] == floor:
            return
        self.targets.append(floor)

    def distance_to_floor(self, floor: int) -> int:
        return abs(floor - self.current_floor)

    def is_idle(self) -> bool:
        return not self.targets and not self.door_open and self.direction is Direction.IDLE

    def step(self) -> None:
        if self.door_open:
            self._close_doors()
            return

        if not self.targets:
            self.direction = Direction.IDLE
            return

        target = self.targets[0]
        if self.current_floor < target:
            self.current_floor += 1
            self.direction = Direction.UP
        elif self.current_floor > target:
            self.current_floor -= 1
            self.direction = Direction.DOWN
        else:
            # Direction is left as it was for the door-open tick.
            self.door_open = True
            logger.debug("Elevator %s opened doors at floor %s", self.elevator_id, self.current_floor)

    def _close_doors(self) -> None:
        self.door_open = False
        self.total_stops_served += 1
        if self.targets and self.targets[0] == self.current_floor:
            self.targets.popleft()
        if not self.targets:
            self.direction = Direction.IDLE

    def status(self) -> ElevatorStatus:
        return ElevatorStatus(
            elevator_id=self.elevator_id,
            floor=self.current_floor,
            direction=self.direction,
            door_open=self.door_open,
            queue_size=self.queue_size,
            stops_served=self.total_stops_served,
        )
