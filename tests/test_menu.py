import io
import sys
from pathlib import Path

import pytest

from clinic.data import Nationality
from clinic.engine import Engine
from clinic.menu import Menu, main, step_selection


@pytest.fixture
def engine(tmp_path: Path) -> Engine:
    return Engine(tmp_path / "data.dat")


def make_menu(engine: Engine, keys: str) -> tuple[Menu, io.StringIO]:
    out = io.StringIO()
    return Menu(engine, io.StringIO(keys), out), out


@pytest.mark.parametrize(
    ("index", "size", "key", "expected"),
    [
        (0, 5, "w", 4),
        (0, 5, "d", 4),
        (3, 5, "w", 2),
        (4, 5, "s", 0),
        (4, 5, "a", 0),
        (1, 5, "s", 2),
        (0, 5, "3", 2),
        (2, 5, "0", 2),
        (2, 5, "9", 2),
        (1, 4, "4", 3),
        (1, 4, "5", 1),
    ],
)
def test_step_selection_moves(index, size, key, expected) -> None:
    assert step_selection(index, size, key) == expected


@pytest.mark.parametrize("key", [" ", "q", "x"])
def test_step_selection_other_keys(key) -> None:
    assert step_selection(1, 5, key) is None


def test_teams_menu_selects_with_enter(engine: Engine) -> None:
    menu, _ = make_menu(engine, "s\n")
    assert menu.teams_menu() is engine.teams[1]


def test_teams_menu_digit_then_select(engine: Engine) -> None:
    menu, out = make_menu(engine, "4 ")
    assert menu.teams_menu() is engine.teams[3]
    assert "International All-Stars" in out.getvalue()


def test_teams_menu_wraps_upwards(engine: Engine) -> None:
    menu, _ = make_menu(engine, "wx")
    assert menu.teams_menu() is engine.teams[-1]


def test_teams_menu_without_teams(engine: Engine) -> None:
    engine.teams = []
    menu, _ = make_menu(engine, " ")
    with pytest.raises(LookupError):
        menu.teams_menu()


def test_run_entry_country(engine: Engine) -> None:
    menu, out = make_menu(engine, "x")
    menu.run_entry(3)
    text = out.getvalue()
    assert "Country: Italy" in text
    assert text.endswith("Press any key to continue...")


def test_run_entry_show_players(engine: Engine) -> None:
    menu, out = make_menu(engine, "\nx")
    menu.run_entry(0)
    assert engine.show_players(engine.teams[0]) in out.getvalue()


def test_run_entry_show_top(engine: Engine) -> None:
    menu, out = make_menu(engine, "x")
    menu.run_entry(1)
    assert engine.show_top() in out.getvalue()


def test_run_entry_eliminate(engine: Engine) -> None:
    menu, out = make_menu(engine, "s\n10\nx")
    menu.run_entry(2)
    assert "Successfully eliminated 1 players" in out.getvalue()
    assert all(p.goal_count >= 10 for p in engine.teams[1].players)


def test_run_entry_eliminate_bad_number(engine: Engine) -> None:
    menu, out = make_menu(engine, "\nabc\nx")
    before = list(engine.teams[0].players)
    menu.run_entry(2)
    assert "Successfully eliminated 0 players" in out.getvalue()
    assert engine.teams[0].players == before


def test_main_menu_runs_entry_and_quits(engine: Engine) -> None:
    menu, out = make_menu(engine, "5\nxq")
    menu.main_menu()
    assert "Miguel Rodriguez - 20\n" in out.getvalue()


def test_main_menu_quits_at_end_of_input(engine: Engine) -> None:
    menu, out = make_menu(engine, "")
    menu.main_menu()
    assert "Show Players with most goals" in out.getvalue()


def test_main_menu_quit_leaves_teams_unchanged(engine: Engine) -> None:
    menu, _ = make_menu(engine, "ssq")
    menu.main_menu()
    assert engine.country_with_most_players() is Nationality.IT


def test_main(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    save_file = tmp_path / "save.dat"
    out = io.StringIO()
    monkeypatch.setattr(sys, "stdin", io.StringIO("q"))
    monkeypatch.setattr(sys, "stdout", out)
    assert main(["--save-file", str(save_file)]) == 0
    assert save_file.is_file()
    assert "All data saved successfully\nGoodbye!" in out.getvalue()