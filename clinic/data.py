"""Core data types: nationalities, players and teams."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class Nationality(IntEnum):
    """Country a player comes from; the value is what the save file stores."""

    AR = 0
    AU = 1
    BR = 2
    CA = 3
    CN = 4
    DE = 5
    EG = 6
    ES = 7
    FR = 8
    GB = 9
    IT = 10
    JP = 11
    KR = 12
    MX = 13
    NL = 14
    PL = 15
    PT = 16
    RO = 17
    RU = 18
    SE = 19
    US = 20


_COUNTRY_NAMES = {
    Nationality.AR: "Argentina",
    Nationality.AU: "Australia",
    Nationality.BR: "Brazil",
    Nationality.CA: "Canada",
    Nationality.CN: "China",
    Nationality.DE: "Germany",
    Nationality.EG: "Egypt",
    Nationality.ES: "Spain",
    Nationality.FR: "France",
    Nationality.GB: "Great Britain",
    Nationality.IT: "Italy",
    Nationality.JP: "Japan",
    Nationality.KR: "South Korea",
    Nationality.MX: "Mexico",
    Nationality.NL: "Netherlands",
    Nationality.PL: "Poland",
    Nationality.PT: "Portugal",
    Nationality.RO: "Romania",
    Nationality.RU: "Russia",
    Nationality.SE: "Sweden",
    Nationality.US: "United States",
}


def country_name(nationality: Nationality | int) -> str:
    """Return the full country name, or "Unknown" for an unrecognised value."""
    try:
        return _COUNTRY_NAMES[Nationality(nationality)]
    except ValueError:
        return "Unknown"


@dataclass
class Player:
    """A player with a nationality and a goal tally."""

    name: str
    nationality: Nationality
    goal_count: int


@dataclass
class Team:
    """A named team of players with its league points."""

    name: str
    players: list[Player] = field(default_factory=list)
    points: int = 0