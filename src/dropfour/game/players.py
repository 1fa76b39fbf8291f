from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from dropfour.types import Tile


class ActivePlayer(Enum):
    PLAYER1 = "player1"
    PLAYER2 = "player2"
    AI = "ai"


@dataclass(slots=True)
class Player:
    name: str
    tile: Tile
    score: int = 0

    def __str__(self) -> str:
        return self.name

    @classmethod
    def ai_placeholder(cls) -> "Player":
        return cls(name="AI", tile=Tile.PLAYER2)


@dataclass(slots=True)
class Players:
    """
    The two human seats plus the computer seat.
    The computer only ever replaces player 2 and keeps no score.
    """
    player1: Player = field(default_factory=lambda: Player("a", Tile.PLAYER1))
    player2: Player = field(default_factory=lambda: Player("b", Tile.PLAYER2))
    ai: Player = field(default_factory=Player.ai_placeholder)
    active: ActivePlayer = ActivePlayer.PLAYER1

    def current(self) -> Player:
        if self.active is ActivePlayer.PLAYER1:
            return self.player1
        if self.active is ActivePlayer.PLAYER2:
            return self.player2
        return self.ai

    def scored(self) -> None:
        if self.active is ActivePlayer.PLAYER1:
            self.player1.score += 1
        elif self.active is ActivePlayer.PLAYER2:
            self.player2.score += 1

    def swap(self, ai_enabled: bool = False) -> None:
        if self.active is ActivePlayer.PLAYER1:
            self.active = ActivePlayer.AI if ai_enabled else ActivePlayer.PLAYER2
        else:
            self.active = ActivePlayer.PLAYER1

    def set_active(self, active: ActivePlayer) -> None:
        self.active = active

    def reset_scores(self) -> None:
        self.player1.score = 0
        self.player2.score = 0

    def scoreline(self) -> str:
        return (
            f"{self.player1.name}'s score: {self.player1.score}\t"
            f"{self.player2.name}'s score: {self.player2.score}"
        )
