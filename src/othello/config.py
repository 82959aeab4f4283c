"""
Configuration parameters for the Othello engine.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any
import json

from .board import DiskColor


@dataclass
class GameConfig:
    """Configuration for a single game session."""
    board_size: int = 8
    first_color: str = "black"  # Color of the first mover
    auto_pass: bool = False  # Pass automatically for a player with no moves
    black_name: str = "Player 1"
    white_name: str = "Player 2"

    @property
    def first_disk_color(self) -> DiskColor:
        return DiskColor(self.first_color.lower())

    def validate(self) -> 'GameConfig':
        """Check the values, raising ValueError on the first bad one."""
        if not isinstance(self.board_size, int) or self.board_size < 4 or self.board_size % 2 != 0:
            raise ValueError(f"board_size must be an even integer >= 4, got {self.board_size!r}")
        if not isinstance(self.first_color, str) or self.first_color.lower() not in {c.value for c in DiskColor}:
            raise ValueError(f"first_color must be 'black' or 'white', got {self.first_color!r}")
        return self


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_to_file: bool = False
    verbose: bool = True


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "othello"
    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'othello'),
            game=GameConfig(**config_dict.get('game', {})).validate(),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
