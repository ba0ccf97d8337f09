"""
Main script to play Ruversi in the terminal.
"""
import os
import sys
import argparse
from pathlib import Path

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute()))

from src.config import Config, PLAYER_KINDS, get_default_config
from src.game import ReversiError
from src.interface import ConsoleIO, build_game
from src.logger import setup_logger

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Play Reversi in the terminal')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                      help='Path to config file')
    parser.add_argument('--layout', type=str, default=None,
                      help='64-character starting layout of o, x and _')
    parser.add_argument('--dark', choices=PLAYER_KINDS, default=None,
                      help='Player kind for Dark')
    parser.add_argument('--light', choices=PLAYER_KINDS, default=None,
                      help='Player kind for Light')
    parser.add_argument('--dark-moves', type=str, default=None,
                      help='Moves for a scripted Dark player, e.g. "4,3 3,5"')
    parser.add_argument('--light-moves', type=str, default=None,
                      help='Moves for a scripted Light player')
    parser.add_argument('--log-level', type=str, default=None,
                      help='Logging level (DEBUG, INFO, WARNING, ...)')
    return parser.parse_args(argv)

def load_config(args) -> Config:
    """Load the config file, if any, and apply command line overrides."""
    if os.path.exists(args.config):
        config = Config.load(args.config)
    else:
        config = get_default_config()

    if args.layout is not None:
        config.game.initial_layout = args.layout
    if args.dark is not None:
        config.players.dark = args.dark
    if args.light is not None:
        config.players.light = args.light
    if args.dark_moves is not None:
        config.players.dark_moves = args.dark_moves
    if args.light_moves is not None:
        config.players.light_moves = args.light_moves
    if args.log_level is not None:
        config.logging.log_level = args.log_level
    return config

def main(argv=None) -> int:
    """Run one game with the configured players."""
    args = parse_args(argv)
    config = load_config(args)
    logger = setup_logger(config)

    try:
        game = build_game(config, ConsoleIO())
        game.run()
    except (ReversiError, ValueError, RuntimeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except (KeyboardInterrupt, EOFError):
        print("\nGame interrupted.")
        return 130
    finally:
        logger.close()
    return 0

if __name__ == "__main__":
    sys.exit(main())
