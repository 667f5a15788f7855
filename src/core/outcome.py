"""
Result of an engine action.
----

The engine never throws on a rejected move or wall. It hands back an Outcome instead,
and the layers above decide whether to turn the rejection into an exception (see `raise_for_rejection`).
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional, Self

from src.core.exceptions import (
    GameError,
    IllegalMoveError,
    PlayerNotFoundError,
    TooFewPlayersError,
)


class RejectionReason(StrEnum):
    ILLEGAL_MOVE = "illegal move"
    PLAYER_NOT_FOUND = "player not found"
    TOO_FEW_PLAYERS = "too few players"


REJECTION_ERRORS: dict[RejectionReason, type[GameError]] = {
    RejectionReason.ILLEGAL_MOVE: IllegalMoveError,
    RejectionReason.PLAYER_NOT_FOUND: PlayerNotFoundError,
    RejectionReason.TOO_FEW_PLAYERS: TooFewPlayersError,
}


@dataclass(frozen=True)
class Outcome:
    reason: Optional[RejectionReason] = None
    message: str = ""

    @classmethod
    def ok(cls) -> Self:
        return cls()

    @classmethod
    def rejected(cls, reason: RejectionReason, message: str) -> Self:
        return cls(reason, message)

    @property
    def accepted(self) -> bool:
        return self.reason is None

    def raise_for_rejection(self) -> None:
        """Convert a rejection into the matching exception. No-op for an accepted action."""
        if self.reason is None:
            return
        raise REJECTION_ERRORS[self.reason](self.message)
