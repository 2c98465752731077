"""Utility functions for the decision intelligence engine."""

import logging
import logging.handlers
import math
from pathlib import Path
from typing import Any, Dict, Optional, Union
import yaml


def load_config(config_path: Union[str, Path] = "config.yaml") -> Dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, 'r') as f:
        config = yaml.safe_load(f)

    return config or {}


def setup_logging(config: Optional[Dict[str, Any]] = None) -> logging.Logger:
    """Setup logging configuration.

    Args:
        config: Logging configuration dictionary

    Returns:
        Configured logger instance
    """
    if config is None:
        config = {
            'level': 'INFO',
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        }

    logger = logging.getLogger('decision_intel')
    logger.setLevel(getattr(logging, config.get('level', 'INFO')))

    # Repeated calls (tests, reloads) must not stack handlers
    if logger.handlers:
        return logger

    formatter = logging.Formatter(config.get('format'))

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler with rotation
    if config.get('file'):
        file_handler = logging.handlers.RotatingFileHandler(
            config['file'],
            maxBytes=config.get('max_bytes', 10485760),
            backupCount=config.get('backup_count', 5)
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2).

    Percentages shown to users follow this rule rather than Python's
    round-half-to-even.
    """
    return int(math.floor(value + 0.5))


def to_percent(value: float, total: float) -> int:
    """Express value as a whole percentage of total.

    Args:
        value: Part
        total: Whole; zero yields 0 instead of a division error

    Returns:
        Rounded percentage
    """
    if total == 0:
        return 0
    return round_half_up(value / total * 100)
