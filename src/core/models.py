"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field
from typing import Optional

# Type aliases to make GameModel easier to read
PlayerName = str
CellNotation = str
WallNotation = str


@dataclass
class GameModel:
    """Transport-safe representation of a Quoridor game used between API, Service, DB, and Game layers."""

    player_names: list[PlayerName]
    positions: list[CellNotation]
    walls: list[WallNotation]
    history: list[str]
    current_player: int
    status: str
    winner: Optional[PlayerName] = field(default=None)
