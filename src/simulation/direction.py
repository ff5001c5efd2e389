from __future__ import annotations

from enum import Enum


class Direction(Enum):
    """Travel direction of an elevator; the value is the signed floor step."""

    IDLE = 0
    UP = 1
    DOWN = -1

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def letter(self) -> str:
        return self.name[0]
