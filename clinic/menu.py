"""Interactive terminal menus and the program entry point."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence, TextIO

from clinic.data import Team, country_name
from clinic.engine import Engine
from clinic.terminal import RGB, clear_screen, color, get_char, reset_color, wait_for_key

SAVE_FILE = "data.dat"

SELECTED_COLOR = RGB(245, 212, 66)
UNSELECTED_COLOR = RGB(112, 109, 96)

MAIN_MENU_ENTRIES = (
    "Show Team",
    "Show Teams in Order",
    "Eliminate Players with less than x goals",
    "Show Country with most players",
    "Show Players with most goals",
)


def step_selection(index: int, size: int, key: str) -> int | None:
    """Return the new selection for a navigation key, or None for any other key.

    A digit from 1 to size selects that entry directly; other digits leave the
    selection unchanged. w/d move up and s/a move down, wrapping around.
    """
    if len(key) == 1 and key in "0123456789":
        number = int(key)
        return number - 1 if 0 < number <= size else index
    if key in ("w", "d"):
        return size - 1 if index == 0 else index - 1
    if key in ("s", "a"):
        return 0 if index == size - 1 else index + 1
    return None


def _highlight(selected: bool) -> str:
    return color(SELECTED_COLOR if selected else UNSELECTED_COLOR)


def _parse_number(line: str) -> int:
    token = line.split()[0] if line.split() else ""
    try:
        return int(token)
    except ValueError:
        return 0


class Menu:
    """Keyboard-driven menus over an engine's teams."""

    def __init__(self, engine: Engine, stdin: TextIO, stdout: TextIO) -> None:
        self.engine = engine
        self.stdin = stdin
        self.stdout = stdout

    def _render(self, labels: Sequence[str], selected: int) -> None:
        clear_screen(self.stdout)
        for number, label in enumerate(labels, start=1):
            self.stdout.write(
                f"{_highlight(number - 1 == selected)}{number}) {label}\n{reset_color()}"
            )
        self.stdout.flush()

    def teams_menu(self) -> Team:
        """Let the user pick a team and return it."""
        teams = self.engine.teams
        if not teams:
            raise LookupError("there are no teams to choose from")
        index = 0
        while True:
            self._render([team.name for team in teams], index)
            new_index = step_selection(index, len(teams), get_char(self.stdin))
            if new_index is None:
                return teams[index]
            index = new_index

    def _read_number(self) -> int:
        line = self.stdin.readline()
        while line and not line.strip():
            line = self.stdin.readline()
        return _parse_number(line)

    def run_entry(self, index: int) -> None:
        """Run one main menu entry, then wait for a key press."""
        clear_screen(self.stdout)
        out = self.stdout
        if index == 0:
            out.write(self.engine.show_players(self.teams_menu()))
        elif index == 1:
            out.write(self.engine.show_top())
        elif index == 2:
            team = self.teams_menu()
            out.write("\nEnter number: ")
            out.flush()
            removed = self.engine.eliminate_less_than(team, self._read_number())
            out.write(
                f"{_highlight(True)}\nSuccessfully eliminated {removed} players{reset_color()}"
            )
        elif index == 3:
            out.write("Country: " + country_name(self.engine.country_with_most_players()))
        elif index == 4:
            for player in self.engine.most_goals():
                out.write(f"{player.name} - {player.goal_count}\n")
        out.flush()
        wait_for_key(self.stdin, self.stdout)

    def main_menu(self) -> None:
        """Show the main menu until the user quits or input ends."""
        index = 0
        try:
            while True:
                self._render(MAIN_MENU_ENTRIES, index)
                key = get_char(self.stdin)
                new_index = step_selection(index, len(MAIN_MENU_ENTRIES), key)
                if new_index is not None:
                    index = new_index
                elif key == "q":
                    return
                else:
                    self.run_entry(index)
        except EOFError:
            return


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive team manager."""
    parser = argparse.ArgumentParser(prog="clinic", description="Manage football teams.")
    parser.add_argument("--save-file", default=SAVE_FILE, help="path of the save file")
    args = parser.parse_args(argv)

    engine = Engine(args.save_file)
    Menu(engine, sys.stdin, sys.stdout).main_menu()

    sys.stdout.write(
        f"{color(RGB(0, 255, 0))}\n\nAll data saved successfully\nGoodbye!{reset_color()}\n"
    )
    sys.stdout.flush()
    return 0