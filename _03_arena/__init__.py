"""Match configuration and runners for tic-tac-toe agents."""

from .config import MatchConfig, load_config_from_yaml, merge_overrides
from .match import GameRecord, MatchSummary, create_agent, play_match

__all__ = [
    "GameRecord",
    "MatchConfig",
    "MatchSummary",
    "create_agent",
    "load_config_from_yaml",
    "merge_overrides",
    "play_match",
]
