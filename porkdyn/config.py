"""
Configuration loading and logging setup.
"""

import logging
import sys
from typing import Dict

import yaml

from .exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_config(config_path: str) -> Dict:
    """Load configuration from YAML file."""
    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}
        logger.info(f"Configuration loaded from {config_path}")
        return config
    except FileNotFoundError:
        logger.warning(f"Config file {config_path} not found, using defaults")
        return get_default_config()
    except yaml.YAMLError as e:
        logger.error(f"Error parsing config file: {e}")
        raise ConfigError(f"Error parsing config file {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e


def get_default_config() -> Dict:
    """Return default configuration."""
    return {
        "dns_providers": {
            "porkbun": {
                "base_url": "https://api.porkbun.com/api/json/v3",
                "timeout": 10,
            }
        },
        "default_provider": "porkbun",
        "reconciliation": {"parallel": False},
        "logging": {"level": "INFO"},
    }


def configure_logging(config: Dict):
    """Configure logging."""
    logging_config = config.get("logging") or {}
    log_level = logging_config.get("level", "INFO")
    handlers = [logging.StreamHandler(sys.stdout)]

    log_file = logging_config.get("file")
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )
