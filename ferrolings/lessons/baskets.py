"""Collections: fruit baskets, a football scores table and doubling numbers."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable


def fruit_basket() -> dict[str, int]:
    """Return a basket holding at least three kinds and five pieces of fruit."""
    return {"banana": 2, "apple": 10, "orange": 50}


class Fruit(enum.Enum):
    """Kinds of fruit for the fruit cake."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add 10 of every kind of fruit missing from the basket, in place."""
    for fruit in Fruit:
        basket.setdefault(fruit, 10)


@dataclass
class Team:
    """Goals a team has scored and conceded."""

    goals_scored: int
    goals_conceded: int


def _goals(field: str) -> int:
    goals = int(field)
    if not 0 <= goals <= 255:
        raise ValueError(f"goal count out of range: {field!r}")
    return goals


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals per team from "team1,team2,goals1,goals2" lines."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        score_1, score_2 = _goals(fields[2]), _goals(fields[3])
        for name, scored, conceded in ((team_1, score_1, score_2), (team_2, score_2, score_1)):
            team = scores.get(name)
            if team is None:
                scores[name] = Team(goals_scored=scored, goals_conceded=conceded)
            else:
                team.goals_scored += scored
                team.goals_conceded += conceded
    return scores


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return a fixed tuple and a list holding the same elements."""
    fixed = (10, 20, 30, 40)
    return fixed, list(fixed)


def vec_loop(values: list[int]) -> list[int]:
    """Double every element in place and return the same list."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: Iterable[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]