from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List, Optional, Tuple

from .interface import Assignment, ElevatorSnapshot, PendingRequest
from .utils import append_targets, is_in_path


class DirectionalScheduler:
    """Scores every elevator per request by distance, heading and queue length.

    score = distance to the pickup floor
            + ``reversal_penalty`` if a moving elevator would have to turn
            + number of queued targets

    The lowest score wins; on a tie the elevator seen first keeps the
    request. Chosen elevators are updated in the working snapshot so later
    requests in the same pass see their longer queue.
    """

    def __init__(self, reversal_penalty: int = 5) -> None:
        self.reversal_penalty = reversal_penalty

    def select_calls(
        self,
        elevator_state: Iterable[ElevatorSnapshot],
        pending_requests: Iterable[PendingRequest],
    ) -> List[Assignment]:
        assignments: List[Assignment] = []
        elevators = list(elevator_state)
        for index, request in enumerate(pending_requests):
            chosen = self._best_elevator(elevators, request)
            if chosen is None:
                continue
            position, score = chosen
            elevator = elevators[position]
            targets = (request.origin, request.destination)
            elevators[position] = replace(
                elevator, targets=append_targets(elevator.targets, targets)
            )
            assignments.append(
                Assignment(
                    request_index=index,
                    elevator_id=elevator.elevator_id,
                    targets=targets,
                    score=score,
                )
            )
        return assignments

    def score(self, elevator: ElevatorSnapshot, request: PendingRequest) -> int:
        score = elevator.distance_to(request.origin)
        if not is_in_path(elevator, request.origin):
            score += self.reversal_penalty
        return score + elevator.queue_size

    def _best_elevator(
        self, elevators: List[ElevatorSnapshot], request: PendingRequest
    ) -> Optional[Tuple[int, int]]:
        best: Optional[Tuple[int, int]] = None
        for position, elevator in enumerate(elevators):
            score = self.score(elevator, request)
            if best is None or score < best[1]:
                best = (position, score)
        return best
