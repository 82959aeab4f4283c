"""
Logging utilities for the Othello engine.
"""
import os
import json
import logging
from datetime import datetime
from typing import Optional

from .board import DiskColor
from .config import Config
from .outcome import Outcome

LOGGER_NAME = 'othello'


class Logger:
    """Configures the package logger and records game events."""

    def __init__(self, config: Config, log_dir: Optional[str] = None):
        """
        Initialize the logger.

        Args:
            config: Configuration object
            log_dir: Directory to save logs (default: config.logging.log_dir)
        """
        self.config = config
        self.log_dir = log_dir or config.logging.log_dir
        self.run_name = f"{config.project_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        self.run_dir = None
        level = logging.getLevelName(config.logging.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level {config.logging.log_level!r}")

        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        self.handlers = []

        # Set up console logging
        if config.logging.verbose:
            console = logging.StreamHandler()
            console.setLevel(level)
            console.setFormatter(formatter)
            self.handlers.append(console)

        # Set up file logging
        if config.logging.log_to_file:
            self.run_dir = os.path.join(self.log_dir, self.run_name)
            os.makedirs(self.run_dir, exist_ok=True)
            file_handler = logging.FileHandler(os.path.join(self.run_dir, 'game.log'))
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.handlers.append(file_handler)
            self.save_config()

        # Configure the package logger
        self.logger = logging.getLogger(LOGGER_NAME)
        self._previous_level = self.logger.level
        self.logger.setLevel(level)
        for handler in self.handlers:
            self.logger.addHandler(handler)

    def save_config(self):
        """Save the configuration to a JSON file in the run directory."""
        config_path = os.path.join(self.run_dir, 'config.json')
        with open(config_path, 'w') as f:
            json.dump(self.config.to_dict(), f, indent=2)

    def log_scores(self, game, step: int):
        """Log the current disk counts of a game."""
        black = game.score(DiskColor.BLACK)
        white = game.score(DiskColor.WHITE)
        self.logger.info(f"Step {step}: black={black} white={white} status={game.status().value}")

    def log_outcome(self, outcome: Outcome):
        """Log the result of an engine command."""
        if not outcome.accepted:
            self.logger.warning(f"Rejected: {outcome.message}"
                                + (f" at {tuple(outcome.position)}" if outcome.position is not None else ""))
            return

        if outcome.position is not None:
            self.logger.info(f"Move at {tuple(outcome.position)} flipped {len(outcome.flipped)} disk(s)")
        for player in outcome.passed:
            self.logger.info(f"{player} passed")
        if outcome.next_player is not None:
            self.logger.info(f"Next: {outcome.next_player} [{outcome.status.value}]")

    def close(self):
        """Detach and close the handlers this logger added and restore the level."""
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers = []
        self.logger.setLevel(self._previous_level)


def setup_logger(config: Config) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object

    Returns:
        Logger instance
    """
    return Logger(config)
