"""Who sits in each seat."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .types import Seat


class PlayerKind(str, Enum):
    HUMAN = "human"
    COMPUTER = "computer"


class SkillTier(str, Enum):
    """Computer opponent strength. Profiles per tier live in ``reversi.agents.difficulty``."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True)
class PlayerInfo:
    """
    Seat assignment.

    A skill tier is present exactly when the player is a computer; any other
    combination raises ``ValueError``.
    """

    seat: Seat
    kind: PlayerKind = PlayerKind.HUMAN
    tier: Optional[SkillTier] = None

    def __post_init__(self) -> None:
        if self.kind is PlayerKind.COMPUTER and self.tier is None:
            raise ValueError(f"Computer player for {self.seat.name} needs a skill tier")
        if self.kind is PlayerKind.HUMAN and self.tier is not None:
            raise ValueError(f"Human player for {self.seat.name} cannot have a skill tier")

    @classmethod
    def human(cls, seat: Seat) -> "PlayerInfo":
        return cls(seat=seat, kind=PlayerKind.HUMAN)

    @classmethod
    def computer(cls, seat: Seat, tier: SkillTier) -> "PlayerInfo":
        return cls(seat=seat, kind=PlayerKind.COMPUTER, tier=tier)

    @property
    def is_human(self) -> bool:
        return self.kind is PlayerKind.HUMAN

    @property
    def is_computer(self) -> bool:
        return self.kind is PlayerKind.COMPUTER

    @property
    def display_name(self) -> str:
        if self.tier is None:
            return self.seat.display_name
        return f"{self.seat.display_name} ({self.tier.value} computer)"
