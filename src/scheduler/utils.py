from __future__ import annotations

from typing import Iterable, Tuple

from .interface import ElevatorSnapshot


def is_in_path(elevator: ElevatorSnapshot, floor: int) -> bool:
    """True when serving ``floor`` does not make a moving elevator turn around."""

    if elevator.direction == 0:
        return True
    return (elevator.direction > 0 and floor >= elevator.floor) or (
        elevator.direction < 0 and floor <= elevator.floor
    )


def append_targets(targets: Tuple[int, ...], floors: Iterable[int]) -> Tuple[int, ...]:
    """Append floors the way an elevator queue does, skipping repeats of the tail."""

    queue = list(targets)
    for floor in floors:
        if queue and queue[-1] == floor:
            continue
        queue.append(floor)
    return tuple(queue)
