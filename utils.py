# utils.py
"""
Utility functions for the particle text application.

Logging setup and configuration loading live here; they are used by the
entry point but do not belong to the animation engine itself.
"""
import json
import logging
import logging.handlers
import os
from typing import Any, Dict, List

from constants import DEFAULT_WORDS

DEFAULT_LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
DEFAULT_LOG_FILE = 'logs/particle_text.log'

# --- Data Contracts ---
#
# setup_logging(config: Dict[str, Any]) -> None:
#   - Inputs:
#     - config: A dictionary with an optional "logging" key holding
#       "level", "format" and "log_file" (null disables the file handler).
#   - Side Effects: Replaces the root logger's handlers with a console
#     handler and a rotating file handler (1MB x 5 backups).
#
# load_config(path: str) -> Dict[str, Any]:
#   - Outputs: the parsed JSON object.
#   - Failure: logs and re-raises FileNotFoundError / json.JSONDecodeError.
#
# resolve_words(config: Dict[str, Any]) -> List[str]:
#   - Outputs: the configured word playlist, or DEFAULT_WORDS if absent.
#   - Failure: ValueError for an empty or non-string playlist.


def setup_logging(config: Dict[str, Any]) -> None:
    """
    Configures the root logger from the "logging" section of the config.
    """
    log_config = config.get('logging', {})
    log_level = log_config.get('level', 'INFO').upper()
    log_format = log_config.get('format', DEFAULT_LOG_FORMAT)
    log_file_path = log_config.get('log_file', DEFAULT_LOG_FILE)

    logger = logging.getLogger()
    logger.setLevel(log_level)

    # Clear existing handlers to avoid duplication
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file_path:
        log_dir = os.path.dirname(log_file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file_path, maxBytes=1024*1024, backupCount=5
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logging.info("Logging system initialized.")
    logging.debug(f"Log level set to {log_level}, file: {log_file_path or 'disabled'}.")


def load_config(path: str) -> Dict[str, Any]:
    """Loads a JSON configuration file."""
    logging.info(f"Loading configuration from {path}...")
    try:
        with open(path, 'r') as f:
            config = json.load(f)
    except FileNotFoundError:
        logging.error(f"Configuration file not found at {path}.")
        raise
    except json.JSONDecodeError:
        logging.error(f"Error decoding JSON from {path}.")
        raise
    logging.info("Configuration loaded successfully.")
    return config


def resolve_words(config: Dict[str, Any]) -> List[str]:
    """Returns the word playlist from the "animation" section."""
    words = config.get('animation', {}).get('words')
    if words is None:
        logging.info(f"No words configured. Using defaults: {DEFAULT_WORDS}")
        return list(DEFAULT_WORDS)

    if not isinstance(words, list) or not words or not all(isinstance(w, str) for w in words):
        msg = f"Configuration error: 'words' must be a non-empty list of strings, got {words!r}."
        logging.critical(msg)
        raise ValueError(msg)
    return list(words)
