from __future__ import annotations

from typing import Dict, Type

from .directional import DirectionalScheduler
from .interface import Assignment, ElevatorSnapshot, PendingRequest, Scheduler

__all__ = [
    "Assignment",
    "DirectionalScheduler",
    "ElevatorSnapshot",
    "PendingRequest",
    "Scheduler",
    "get_scheduler",
]


SCHEDULER_REGISTRY: Dict[str, Type[Scheduler]] = {
    "directional": DirectionalScheduler,
}


def get_scheduler(name: str, **kwargs) -> Scheduler:
    cls = SCHEDULER_REGISTRY.get(name.lower())
    if cls is None:
        raise ValueError(f"Unknown scheduler '{name}'. Available: {', '.join(SCHEDULER_REGISTRY)}")
    return cls(**kwargs)
