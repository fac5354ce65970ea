"""Terminal menu and library for managing football teams, players and their goals."""

__version__ = "0.1.0"