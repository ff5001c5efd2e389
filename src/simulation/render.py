"""Plain-text views of simulation snapshots for the console."""
from __future__ import annotations

from typing import List, Optional

from .elevator import ElevatorStatus
from .simulation import SimulationSummary, TickSnapshot

EMPTY_CELL = "[            ]"
LEGEND = "Legend: U=Up, D=Down, I=Idle, Door: Open/Closed"


def render_building(snapshot: TickSnapshot, num_floors: int) -> str:
    lines: List[str] = ["Building view (top = highest floor)", ""]
    for floor in range(num_floors - 1, -1, -1):
        cells = [
            f"[E{s.elevator_id} {s.direction.letter} {s.door_label}]" if s.floor == floor else EMPTY_CELL
            for s in snapshot.elevators
        ]
        lines.append(f"Floor {floor} | " + "".join(cells))
    lines.extend(["", LEGEND])
    return "\n".join(lines)


def render_elevator(status: ElevatorStatus) -> str:
    return (
        f"Elevator {status.elevator_id} | Floor: {status.floor} | Dir: {status.direction.label}"
        f" | Door: {status.door_label} | Queue size: {status.queue_size}"
    )


def render_status(snapshot: TickSnapshot, num_floors: int) -> str:
    lines = [f"=== Time step: {snapshot.time_step} ===", render_building(snapshot, num_floors), ""]
    lines.append("Elevator details:")
    lines.extend(render_elevator(status) for status in snapshot.elevators)
    lines.append(f"Pending requests: {snapshot.pending_requests}")
    return "\n".join(lines)


def render_summary(summary: SimulationSummary, log_path: Optional[str] = None) -> str:
    lines = [
        "===== Simulation Summary =====",
        f"Total time steps: {summary.total_ticks}",
        f"Total requests processed (assigned): {summary.requests_assigned}",
    ]
    for elevator_id, stops in summary.stops_served.items():
        lines.append(f"Elevator {elevator_id} served stops: {stops}")
    if log_path:
        lines.append(f"Log saved to {log_path}")
    return "\n".join(lines)
