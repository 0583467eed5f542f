"""Agent implementations and utilities."""

from .base import Agent, AgentFn, ensure_legal
from .first import FirstLegalAgent
from .minimax import MinimaxAgent
from .random_agent import RandomAgent

__all__ = [
    "Agent",
    "AgentFn",
    "ensure_legal",
    "FirstLegalAgent",
    "MinimaxAgent",
    "RandomAgent",
]
