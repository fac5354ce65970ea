# clinic

`clinic` is a small keyboard-driven terminal program for keeping track of football
teams, their players and the goals each player has scored.

On start it looks for a save file (by default `data.dat` in the current directory).
If the file exists, the teams are loaded from it. If it does not, the file is
created and filled with four built-in teams.

## Installation

```
pip install .
```

## Usage

```
clinic
clinic --save-file path/to/teams.dat
```

The main menu offers five entries:

1. **Show Team**: pick a team and list its players.
2. **Show Teams in Order**: list all teams ranked by points, lowest first.
3. **Eliminate Players with less than x goals**: pick a team, enter a number, and
   remove every player of that team who scored fewer goals than that. Input that is
   not a number counts as 0.
4. **Show Country with most players**: the nationality shared by the most players
   across all teams. On a tie, the nationality that comes first in the
   `Nationality` enumeration wins.
5. **Show Players with most goals**: every player tied for the top goal count,
   sorted by name.

After each entry the program waits for a key press before it returns to the menu.

### Keys

| Key | Action |
| --- | --- |
| `w`, `d`, Up arrow, Right arrow | move the selection up |
| `s`, `a`, Down arrow, Left arrow | move the selection down |
| a digit from `1` to the number of entries | jump to that entry |
| Enter or any other key | open the selected entry |
| `q` | quit the main menu |

The selection wraps around at both ends of a list. Digits outside the list are
ignored. In the team picker, `q` is not special: like any other key, it picks the
highlighted team. The main menu also ends when input runs out.

When standard input is a terminal that supports `termios`, keys are read one at a
time without echo. The highlighted entry is drawn in 24-bit colour, so the terminal
must support true-colour ANSI escape codes.

## What it does not do

Changes made while the program runs are kept only in memory. Removing players with
entry 3 does not write the save file, so the next run loads the teams as they were
saved. The save file is only written when it is first created. The goodbye message
printed on exit does not mean anything was saved.

## Using the library

The pieces can also be used without the menu:

```python
from clinic.engine import Engine
from clinic.data import country_name

engine = Engine("data.dat")
print(country_name(engine.country_with_most_players()))
for player in engine.most_goals():
    print(player.name, player.goal_count)

team = engine.teams[0]
removed = engine.eliminate_less_than(team, 10)
engine.serializer.save_data(engine.teams)  # write the change to disk
```

- `clinic.data` has `Nationality`, `Player`, `Team` and `country_name`.
- `clinic.engine` has `Engine` and `default_teams`.
- `clinic.serializer.Serializer` reads and writes the binary save file with
  `save_data(teams)` and `load_data()`.
- `clinic.binio` has the little-endian read and write helpers the file format uses.
- `clinic.terminal` has the colour, screen and key input helpers.
- `clinic.menu` has `Menu`, `step_selection` and the `main` entry point.

## Running the tests

```
pip install .[test]
pytest
```