from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidFloor, TrivialRequest


@dataclass(frozen=True)
class Request:
    """A rider travelling from one floor to another."""

    origin: int
    destination: int
    requested_at: int


def validate_request(origin: int, destination: int, num_floors: int) -> None:
    """Raise if a request could never be constructed for this building."""

    for floor in (origin, destination):
        if floor < 0 or floor >= num_floors:
            raise InvalidFloor(floor, num_floors)
    if origin == destination:
        raise TrivialRequest(origin)
