"""Typed models for the per-game score records the timeline is built from."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, PlainValidator, model_validator

from ..errors import InvalidPeriodError

REGULATION_PERIODS = 3
REGULATION_PERIOD_MINUTES = 20
OVERTIME_PERIOD_MINUTES = 5
# Shootout sorts after any numbered playoff overtime
SHOOTOUT_RANK = 100


class PeriodKind(str, Enum):
    REGULATION = "regulation"
    OVERTIME = "overtime"
    SHOOTOUT = "shootout"


class GameState(str, Enum):
    NOT_STARTED = "not_started"
    LIVE = "live"
    FINISHED = "finished"


@dataclass(frozen=True)
class Period:
    """A period of a hockey game.

    Regular-season overtime is a single unnumbered 5-minute period ("OT").
    Playoff overtimes are numbered (4, 5, ...) and last 20 minutes each.
    """

    kind: PeriodKind
    number: int | None = None

    @classmethod
    def regulation(cls, number: int) -> Period:
        if not 1 <= number <= REGULATION_PERIODS:
            raise InvalidPeriodError(number)
        return cls(PeriodKind.REGULATION, number)

    @classmethod
    def overtime(cls, number: int | None = None) -> Period:
        if number is not None and number <= REGULATION_PERIODS:
            raise InvalidPeriodError(number)
        return cls(PeriodKind.OVERTIME, number)

    @classmethod
    def shootout(cls) -> Period:
        return cls(PeriodKind.SHOOTOUT)

    @classmethod
    def numbered(cls, number: int) -> Period:
        """Regulation period or numbered overtime for a period number."""
        if number > REGULATION_PERIODS:
            return cls.overtime(number)
        return cls.regulation(number)

    @classmethod
    def parse(cls, value: object) -> Period:
        """Parse a provider period identifier: 1, "2", "OT", "SO", ..."""
        if isinstance(value, Period):
            return value
        if isinstance(value, bool):
            raise InvalidPeriodError(value)
        if isinstance(value, int):
            if value < 1:
                raise InvalidPeriodError(value)
            return cls.numbered(value)
        if isinstance(value, str):
            text = value.strip().upper()
            if text == "OT":
                return cls.overtime()
            if text == "SO":
                return cls.shootout()
            if text.isdigit():
                return cls.parse(int(text))
        raise InvalidPeriodError(value)

    @property
    def length_minutes(self) -> int:
        if self.kind is PeriodKind.OVERTIME and self.number is None:
            return OVERTIME_PERIOD_MINUTES
        return REGULATION_PERIOD_MINUTES

    @property
    def rank(self) -> int:
        if self.kind is PeriodKind.SHOOTOUT:
            return SHOOTOUT_RANK
        if self.number is None:
            return REGULATION_PERIODS + 1
        return self.number

    @property
    def label(self) -> int | str:
        if self.kind is PeriodKind.SHOOTOUT:
            return "SO"
        if self.number is None:
            return "OT"
        return self.number

    @property
    def is_numbered(self) -> bool:
        return self.number is not None

    @property
    def is_final_regulation(self) -> bool:
        return self.kind is PeriodKind.REGULATION and self.number == REGULATION_PERIODS

    def __str__(self) -> str:
        return str(self.label)


PeriodField = Annotated[Period, PlainValidator(Period.parse)]


class Goal(BaseModel):
    """A goal, timed by minutes and seconds elapsed in its period."""

    model_config = ConfigDict(frozen=True)

    team: str
    period: PeriodField
    minute: int = Field(default=0, ge=0)
    second: int = Field(default=0, ge=0, le=59)
    scorer: str | None = None
    assists: tuple[str, ...] = ()
    strength: str | None = None
    empty_net: bool = False

    @model_validator(mode="after")
    def _check_within_period(self) -> Goal:
        if 60 * self.minute + self.second > 60 * self.period.length_minutes:
            raise ValueError(
                f"Goal at {self.minute}:{self.second:02d} is past the end of period {self.period}"
            )
        return self


class Progress(BaseModel):
    """Where a live game currently is.

    ``minute``/``second`` are the time remaining in the current period. Both are
    None when the provider reports the end of the period.
    """

    model_config = ConfigDict(frozen=True)

    current_period: PeriodField
    ordinal: str | None = None
    minute: int | None = Field(default=None, ge=0)
    second: int | None = Field(default=None, ge=0, le=59)

    @model_validator(mode="after")
    def _check_time_pair(self) -> Progress:
        if (self.minute is None) != (self.second is None):
            raise ValueError("Progress needs both minute and second, or neither")
        return self

    @property
    def is_period_end(self) -> bool:
        return self.minute is None or (self.minute == 0 and self.second == 0)

    def remaining_time(self) -> tuple[int, int]:
        """(minute, second) remaining; 0:00 at the end of the period."""
        if self.minute is None:
            return 0, 0
        return self.minute, self.second


class NotStartedStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    state: Literal["not_started"] = "not_started"


class LiveStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    state: Literal["live"] = "live"
    progress: Progress | None = None


class FinishedStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    state: Literal["finished"] = "finished"


Status = Annotated[
    Union[NotStartedStatus, LiveStatus, FinishedStatus],
    Field(discriminator="state"),
]


class Game(BaseModel):
    """One game of the day, as the timeline generator sees it."""

    model_config = ConfigDict(frozen=True)

    away: str
    home: str
    status: Status = Field(default_factory=NotStartedStatus)
    goals: tuple[Goal, ...] = ()
    is_playoff: bool = False

    @property
    def is_live(self) -> bool:
        return self.status.state == GameState.LIVE
