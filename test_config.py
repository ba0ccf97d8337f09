"""
Test script for configuration system.
"""
import json
import logging
import os

from src.config import Config, INITIAL_LAYOUT, get_default_config
from src.game import Board
from src.logger import setup_logger

def test_default_config():
    config = get_default_config()
    assert config.project_name == "Ruversi"
    assert config.players.dark == "human"
    assert config.players.light == "human"
    assert Board.from_str(config.game.initial_layout) == Board.initial()

def test_config_save_and_load(tmp_path):
    """A saved config loads back identical."""
    config = get_default_config()
    config.players.dark = "scripted"
    config.players.dark_moves = "4,3"
    config.logging.log_level = "DEBUG"

    path = tmp_path / "nested" / "config.json"
    config.save(str(path))
    loaded = Config.load(str(path))
    assert loaded.to_dict() == config.to_dict(), "Loaded config should match original"

def test_from_dict_fills_missing_sections():
    config = Config.from_dict({'players': {'light': 'scripted'}})
    assert config.players.light == "scripted"
    assert config.players.dark == "human"
    assert config.game.initial_layout == INITIAL_LAYOUT
    assert config.logging.log_dir == "logs"

def test_default_config_file():
    """The shipped default config matches the built-in defaults."""
    config_path = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                               "configs", "default_config.json")
    with open(config_path) as f:
        assert json.load(f) == get_default_config().to_dict()

def test_logger_writes_file(tmp_path):
    config = get_default_config()
    config.logging.log_dir = str(tmp_path)
    config.logging.log_to_file = True
    config.logging.log_level = "INFO"

    logger = setup_logger(config)
    try:
        logging.getLogger("src.game.game").info("hello from the game loop")
    finally:
        logger.close()

    log_file = os.path.join(logger.run_dir, 'game.log')
    with open(log_file) as f:
        assert "hello from the game loop" in f.read()
    assert Config.load(os.path.join(logger.run_dir, 'config.json')).to_dict() == config.to_dict()
    assert logger.console not in logging.getLogger().handlers

def test_logger_without_file(tmp_path):
    config = get_default_config()
    config.logging.log_dir = str(tmp_path / "unused")
    logger = setup_logger(config)
    logger.close()
    assert logger.file_handler is None
    assert not os.path.exists(config.logging.log_dir)
