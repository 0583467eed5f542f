"""Core game simulation modules for tic-tac-toe."""

from . import action_space, actions, engine, exceptions, formatting, rules, simulate, state

__all__ = [
    "action_space",
    "actions",
    "engine",
    "exceptions",
    "formatting",
    "rules",
    "simulate",
    "state",
]
