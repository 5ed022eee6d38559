"""
Craps Simulator - Storage Models

Pydantic models for data kept between sessions.
"""

from pydantic import BaseModel, Field

from src.engine.base import GameParams


class SavedSettings(BaseModel):
    """Last form values the player started a game with."""

    bankroll: float
    bet: float
    number_of_plays: int = Field(ge=1)

    model_config = {"from_attributes": True}

    @classmethod
    def from_params(cls, params: GameParams) -> "SavedSettings":
        return cls.model_validate(params)

    def to_params(self) -> GameParams:
        return GameParams(
            bankroll=self.bankroll,
            bet=self.bet,
            number_of_plays=self.number_of_plays,
        )
