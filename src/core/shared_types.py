"""
Type definitions used across layers
"""

from enum import StrEnum
from typing import Self


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    FINISHED = "finished"


class Orientation(StrEnum):
    """A wall either runs along a column (vertical) or along a row (horizontal)."""

    VERTICAL = "v"
    HORIZONTAL = "h"

    @property
    def perpendicular(self) -> Self:
        return (
            Orientation.HORIZONTAL
            if self == Orientation.VERTICAL
            else Orientation.VERTICAL
        )
