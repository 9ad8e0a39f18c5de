"""
Typed settings for the score replay timeline.

Uses Pydantic Settings to load configuration from environment variables
with validation and type safety. Pacing values are grouped into a plain
model so the timeline composer can take them as an argument.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PacingConfig(BaseModel):
    """How many timeline entries the animation dwells on each kind of moment."""

    start_multiplier: int = Field(default=50, ge=1)
    period_end_multiplier: int = Field(default=150, ge=1)
    # Extra repetitions per goal scored between two ticks
    goal_multiplier: int = Field(default=50, ge=0)
    # Clock advances this many seconds (or tenths in the last minute of regulation) per tick
    clock_step: int = Field(default=3, ge=1)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    For local development, values are read from a .env file at the project root.
    """

    model_config = SettingsConfigDict(
        env_file=Path(__file__).resolve().parents[1] / ".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="allow",
    )

    environment: str = Field(default="development", alias="ENVIRONMENT")
    log_level: str | None = Field(default=None, alias="LOG_LEVEL")

    # Pause lengths are expressed as counts of the pause multiplier
    pause_multiplier: int = Field(default=50, ge=1, alias="PLAYBACK_PAUSE_MULTIPLIER")
    start_pause: int = Field(default=1, ge=1, alias="PLAYBACK_START_PAUSE")
    period_end_pause: int = Field(default=3, ge=1, alias="PLAYBACK_PERIOD_END_PAUSE")
    goal_pause: int = Field(default=1, ge=0, alias="PLAYBACK_GOAL_PAUSE")
    clock_step: int = Field(default=3, ge=1, alias="PLAYBACK_CLOCK_STEP")

    @property
    def pacing(self) -> PacingConfig:
        return PacingConfig(
            start_multiplier=self.start_pause * self.pause_multiplier,
            period_end_multiplier=self.period_end_pause * self.pause_multiplier,
            goal_multiplier=self.goal_pause * self.pause_multiplier,
            clock_step=self.clock_step,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
