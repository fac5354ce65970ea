"""Saving and loading teams to a binary save file."""

from __future__ import annotations

import os
from pathlib import Path
from typing import BinaryIO, Iterable

from clinic.binio import read_u32, read_wstr, write_u32, write_wstr
from clinic.data import Nationality, Player, Team


class Serializer:
    """Reads and writes the list of teams to a single save file."""

    def __init__(self, save_file: str | os.PathLike[str]) -> None:
        self.save_file = Path(save_file)

    def save_data(self, teams: Iterable[Team]) -> None:
        """Write all teams to the save file, replacing its contents."""
        teams = list(teams)
        with self.save_file.open("wb") as stream:
            write_u32(stream, len(teams))
            for team in teams:
                self._save_team(stream, team)

    def load_data(self) -> list[Team]:
        """Read all teams from the save file."""
        with self.save_file.open("rb") as stream:
            count = read_u32(stream)
            return [self._load_team(stream) for _ in range(count)]

    @staticmethod
    def _save_player(stream: BinaryIO, player: Player) -> None:
        write_wstr(stream, player.name)
        write_u32(stream, int(player.nationality))
        write_u32(stream, player.goal_count)

    def _save_team(self, stream: BinaryIO, team: Team) -> None:
        write_wstr(stream, team.name)
        write_u32(stream, len(team.players))
        for player in team.players:
            self._save_player(stream, player)
        write_u32(stream, team.points)

    @staticmethod
    def _load_player(stream: BinaryIO) -> Player:
        name = read_wstr(stream)
        nationality = Nationality(read_u32(stream))
        goal_count = read_u32(stream)
        return Player(name, nationality, goal_count)

    def _load_team(self, stream: BinaryIO) -> Team:
        name = read_wstr(stream)
        count = read_u32(stream)
        players = [self._load_player(stream) for _ in range(count)]
        points = read_u32(stream)
        return Team(name, players, points)