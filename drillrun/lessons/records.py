"""Worked answers on mappings and lists of records: baskets, score tables, transformations."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_GOALS = re.compile(r"\+?[0-9]+")
_MAX_GOALS = 255


def default_fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds of fruit and at least five pieces."""
    return {"banana": 2, "apple": 20, "mango": 40}


class Fruit(enum.Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add one of every fruit kind missing from ``basket``, leaving present kinds alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    """A team's goal totals."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str) -> int:
    if not _GOALS.fullmatch(text):
        raise ValueError(f"invalid goal count: {text!r}")
    goals = int(text)
    if goals > _MAX_GOALS:
        raise ValueError(f"goal count too large: {text!r}")
    return goals


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals scored and conceded from lines of ``team1,team2,goals1,goals2``."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        name_1, name_2 = fields[0], fields[1]
        goals_1 = _parse_goals(fields[2])
        goals_2 = _parse_goals(fields[3])

        team_1 = scores.setdefault(name_1, Team(name_1))
        team_1.goals_scored += goals_1
        team_1.goals_conceded += goals_2

        team_2 = scores.setdefault(name_2, Team(name_2))
        team_2.goals_scored += goals_2
        team_2.goals_conceded += goals_1
    return scores


class CommandKind(enum.Enum):
    UPPERCASE = "uppercase"
    TRIM = "trim"
    APPEND = "append"


@dataclass(frozen=True)
class Command:
    """A transformation of a string; ``count`` is used by APPEND only."""

    kind: CommandKind
    count: int = 0

    def __post_init__(self):
        if self.count < 0:
            raise ValueError("count must not be negative")

    @classmethod
    def uppercase(cls) -> "Command":
        return cls(CommandKind.UPPERCASE)

    @classmethod
    def trim(cls) -> "Command":
        return cls(CommandKind.TRIM)

    @classmethod
    def append(cls, count: int) -> "Command":
        return cls(CommandKind.APPEND, count)

    def apply(self, text: str) -> str:
        if self.kind is CommandKind.UPPERCASE:
            return text.upper()
        if self.kind is CommandKind.TRIM:
            return text.strip()
        return text + "bar" * self.count


def transformer(items) -> list[str]:
    """Apply each ``(text, command)`` pair's command to its text."""
    return [command.apply(text) for text, command in items]