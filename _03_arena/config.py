"""Match configuration loaded from YAML and command-line overrides.

Example:
    config_dict = load_config_from_yaml("configs/default.yaml")
    config_dict = merge_overrides(config_dict, {"games": 4})
    config = MatchConfig.from_dict(config_dict)
    config.validate()
"""

from __future__ import annotations

import dataclasses
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from _01_simulator import rules

AGENT_NAMES = ("minimax", "first", "random", "human")
LOG_FORMATS = ("text", "json")


@dataclass
class MatchConfig:
    """Settings for a series of games between two agents.

    Attributes:
        board_size: Side length of the square board.
        games: Number of games to play.
        starting_player: Player index (0 = X, 1 = O) that opens the first game.
        alternate_starting: Swap the opening player every game.
        player_x: Agent name for player 0.
        player_o: Agent name for player 1.
        seed: Seed for agents that use randomness.
        log_level: Logging level name.
        log_format: "text" or "json" log lines.
    """

    board_size: int = rules.DEFAULT_BOARD_SIZE
    games: int = 1
    starting_player: int = 0
    alternate_starting: bool = False
    player_x: str = "minimax"
    player_o: str = "minimax"
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "text"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MatchConfig:
        """Create configuration from a dictionary, ignoring unknown keys."""
        known_fields = {f.name for f in dataclasses.fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known_fields})

    def validate(self) -> None:
        """Validate configuration parameters.

        Raises:
            ValueError: If any parameter is invalid.
        """
        if not rules.is_supported_size(self.board_size):
            raise ValueError(
                f"board_size must be in [{rules.MIN_BOARD_SIZE}, {rules.MAX_BOARD_SIZE}], got {self.board_size}"
            )
        if self.games <= 0:
            raise ValueError(f"games must be positive, got {self.games}")
        if not (0 <= self.starting_player < rules.PLAYER_COUNT):
            raise ValueError(f"starting_player must be 0 or 1, got {self.starting_player}")
        for field_name in ("player_x", "player_o"):
            value = getattr(self, field_name)
            if value not in AGENT_NAMES:
                raise ValueError(f"{field_name} must be one of {', '.join(AGENT_NAMES)}, got {value!r}")
        if self.log_format not in LOG_FORMATS:
            raise ValueError(f"log_format must be 'text' or 'json', got {self.log_format!r}")


def load_config_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        path: Path to YAML config file.

    Returns:
        Dictionary of configuration parameters.

    Raises:
        FileNotFoundError: If config file does not exist.
        yaml.YAMLError: If config file is invalid YAML.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        config = yaml.safe_load(f)

    if config is not None and not isinstance(config, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")
    return config or {}


def merge_overrides(config: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``config`` updated with every override that is not ``None``."""
    merged = dict(config)
    merged.update({key: value for key, value in overrides.items() if value is not None})
    return merged


__all__ = [
    "AGENT_NAMES",
    "LOG_FORMATS",
    "MatchConfig",
    "load_config_from_yaml",
    "merge_overrides",
]
