from __future__ import annotations


class InvalidRequest(ValueError):
    """Base class for requests rejected at submission time."""


class InvalidFloor(InvalidRequest):
    def __init__(self, floor: int, num_floors: int) -> None:
        super().__init__(
            f"Invalid request. Floors must be between 0 and {num_floors - 1} (got {floor})."
        )
        self.floor = floor
        self.num_floors = num_floors


class TrivialRequest(InvalidRequest):
    def __init__(self, floor: int) -> None:
        super().__init__(f"You are already on floor {floor}.")
        self.floor = floor
