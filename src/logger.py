"""
Logging utilities for Ruversi.
"""
import os
import logging
from datetime import datetime
from typing import Optional

from .config import Config

class Logger:
    """Configures console and file logging for a game session."""

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
        self.run_dir = os.path.join(self.log_dir, self.run_name)
        level = logging.DEBUG if config.logging.verbose else getattr(
            logging, config.logging.log_level.upper(), logging.INFO)

        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

        # Set up console logging
        self.console = logging.StreamHandler()
        self.console.setLevel(level)
        self.console.setFormatter(formatter)

        # Configure root logger
        self.logger = logging.getLogger()
        self.logger.setLevel(level)
        self.logger.addHandler(self.console)

        # Set up file logging
        self.file_handler = None
        if config.logging.log_to_file:
            os.makedirs(self.run_dir, exist_ok=True)
            self.file_handler = logging.FileHandler(os.path.join(self.run_dir, 'game.log'))
            self.file_handler.setLevel(level)
            self.file_handler.setFormatter(formatter)
            self.logger.addHandler(self.file_handler)
            self.save_config()

    def save_config(self):
        """Save the configuration to a JSON file in the run directory."""
        self.config.save(os.path.join(self.run_dir, 'config.json'))

    def close(self):
        """Flush and detach the handlers this logger installed."""
        for handler in (self.console, self.file_handler):
            if handler is not None:
                self.logger.removeHandler(handler)
                handler.close()
        self.file_handler = None


def setup_logger(config: Config) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object

    Returns:
        Logger instance
    """
    return Logger(config)
