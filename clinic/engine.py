"""Game engine: holds the teams and answers questions about them."""

from __future__ import annotations

import os
from collections import Counter

from clinic.data import Nationality, Player, Team
from clinic.serializer import Serializer


def default_teams() -> list[Team]:
    """Return a fresh copy of the teams used when no save file exists."""
    return [
        Team(
            "Global Stars",
            [
                Player("John Smith", Nationality.US, 15),
                Player("Marco Rossi", Nationality.IT, 12),
                Player("David Kim", Nationality.KR, 8),
                Player("Carlos Vega", Nationality.ES, 10),
                Player("Alex Johnson", Nationality.GB, 7),
            ],
            42,
        ),
        Team(
            "European United",
            [
                Player("Maria Santos", Nationality.BR, 18),
                Player("Pierre Dubois", Nationality.FR, 14),
                Player("Hans Mueller", Nationality.DE, 9),
                Player("Yuki Tanaka", Nationality.JP, 11),
                Player("Andrei Popescu", Nationality.RO, 13),
            ],
            38,
        ),
        Team(
            "World Champions",
            [
                Player("Li Wei", Nationality.CN, 7),
                Player("Anna Kowalski", Nationality.PL, 16),
                Player("Miguel Rodriguez", Nationality.MX, 20),
                Player("Eva Johansson", Nationality.SE, 15),
                Player("Ahmed Hassan", Nationality.EG, 12),
            ],
            35,
        ),
        Team(
            "International All-Stars",
            [
                Player("Robert Clark", Nationality.AU, 9),
                Player("Sofia Ricci", Nationality.IT, 11),
                Player("Jan de Vries", Nationality.NL, 14),
                Player("Elena Ivanova", Nationality.RU, 8),
                Player("Jake Wilson", Nationality.CA, 13),
            ],
            29,
        ),
    ]


class Engine:
    """Loads the teams from the save file, or seeds it with the defaults."""

    def __init__(self, save_file: str | os.PathLike[str]) -> None:
        self.serializer = Serializer(save_file)
        if self.serializer.save_file.is_file():
            self.teams: list[Team] = self.serializer.load_data()
        else:
            self.teams = default_teams()
            self.serializer.save_data(self.teams)

    def show_players(self, team: Team) -> str:
        """Return the line listing the names of a team's players."""
        return "Players: " + "".join(f"{player.name}; " for player in team.players)

    def show_top(self) -> str:
        """Return the ranking of the teams, ordered by ascending points."""
        ranked = sorted(self.teams, key=lambda team: team.points)
        lines = [f"{place}) {team.name}\n" for place, team in enumerate(ranked, start=1)]
        return "Team Top:\n" + "".join(lines)

    def eliminate_less_than(self, team: Team, min_goal_count: int) -> int:
        """Remove players with fewer goals than the limit; return how many went."""
        kept = [player for player in team.players if player.goal_count >= min_goal_count]
        removed = len(team.players) - len(kept)
        team.players[:] = kept
        return removed

    def country_with_most_players(self) -> Nationality:
        """Return the nationality shared by most players; ties go to the first."""
        counts = Counter(
            Nationality(player.nationality)
            for team in self.teams
            for player in team.players
        )
        return max(Nationality, key=lambda nationality: counts[nationality])

    def most_goals(self) -> list[Player]:
        """Return the players with the highest goal count, sorted by name."""
        players = [player for team in self.teams for player in team.players]
        best = max((player.goal_count for player in players), default=0)
        return sorted(
            (player for player in players if player.goal_count == best),
            key=lambda player: player.name,
        )