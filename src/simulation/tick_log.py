from __future__ import annotations

from pathlib import Path
from typing import IO, Optional, Union

from .elevator import ElevatorStatus
from .simulation import Simulation, TickSnapshot

HEADER = "Elevator Simulation Log"


def format_log_line(time_step: int, status: ElevatorStatus) -> str:
    return (
        f"t={time_step} Elevator {status.elevator_id} Floor={status.floor} "
        f"Dir={status.direction.label} Door={status.door_label} QueueSize={status.queue_size}"
    )


class TickLogWriter:
    """Append-only per-tick log, recreated on every run."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._handle: Optional[IO[str]] = None
        self._simulation: Optional[Simulation] = None
        self._last_time = 0

    @property
    def closed(self) -> bool:
        return self._handle is None

    def open(self) -> "TickLogWriter":
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._handle = self.path.open("w", encoding="utf-8")
        self._handle.write(f"{HEADER}\n")
        return self

    def attach(self, simulation: Simulation) -> "TickLogWriter":
        simulation.on_event("tick", self.record)
        self._simulation = simulation
        return self

    def record(self, snapshot: TickSnapshot) -> None:
        if self._handle is None:
            return
        for status in snapshot.elevators:
            self._handle.write(format_log_line(snapshot.time_step, status) + "\n")
        self._last_time = snapshot.time_step

    def close(self, total_steps: Optional[int] = None) -> None:
        if self._handle is None:
            return
        if total_steps is None:
            total_steps = self._simulation.current_time if self._simulation else self._last_time
        self._handle.write(f"Simulation ended. Total time steps: {total_steps}\n")
        self._handle.close()
        self._handle = None

    def __enter__(self) -> "TickLogWriter":
        return self.open()

    def __exit__(self, *exc_info) -> None:
        self.close()
