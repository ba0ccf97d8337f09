"""
Configuration parameters for Ruversi.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any
import json

INITIAL_LAYOUT = (
    "________"
    "________"
    "________"
    "___ox___"
    "___xo___"
    "________"
    "________"
    "________"
)

PLAYER_KINDS = ('human', 'scripted')

@dataclass
class GameConfig:
    """Configuration for the board and turn loop."""
    initial_layout: str = INITIAL_LAYOUT
    max_illegal_attempts: int = 100  # Illegal moves tolerated in one turn

@dataclass
class PlayerConfig:
    """Which kind of player drives each color."""
    dark: str = "human"
    light: str = "human"
    dark_moves: str = ""  # One-based "c,r" pairs, used by scripted players
    light_moves: str = ""

@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "WARNING"
    log_to_file: bool = False
    verbose: bool = False

@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Ruversi"
    game: GameConfig = field(default_factory=GameConfig)
    players: PlayerConfig = field(default_factory=PlayerConfig)
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
            project_name=config_dict.get('project_name', 'Ruversi'),
            game=GameConfig(**config_dict.get('game', {})),
            players=PlayerConfig(**config_dict.get('players', {})),
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
