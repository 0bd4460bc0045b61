"""Configuration file loader with validation"""

import yaml
import os
from pathlib import Path
from typing import Dict, Any
from .errors import ConfigurationError
from paysim.constants import DEFAULT_PROCESSING_DELAY_SECONDS, DEFAULT_FAILURE_RATE

DEFAULT_CONFIG_PATH = "config/checkout.yaml"
DEMO_CONFIG_PATH = "config/checkout_demo.yaml"

REQUIRED_KEYS = ['version', 'processing', 'storage']


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """
    Load YAML configuration file with validation.
    Automatically loads demo config if in demo mode, and applies
    environment variable overrides on top of the file.

    Args:
        config_path: Path to configuration file

    Returns:
        Dictionary with configuration

    Raises:
        ConfigurationError: If file doesn't exist, is invalid YAML or misses keys
    """
    if config_path == DEFAULT_CONFIG_PATH:
        # Only override if using default
        if os.getenv("PAYSIM_CONFIG"):
            config_path = os.getenv("PAYSIM_CONFIG")
        elif os.getenv("DEMO_MODE") == "true":
            config_path = DEMO_CONFIG_PATH

    config_file = Path(config_path)

    if not config_file.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file: {e}")
    except OSError as e:
        raise ConfigurationError(f"Error loading configuration: {e}")

    if not isinstance(config, dict):
        raise ConfigurationError(f"Configuration must be a mapping: {config_path}")

    missing_keys = [key for key in REQUIRED_KEYS if key not in config]
    if missing_keys:
        raise ConfigurationError(f"Missing required configuration keys: {missing_keys}")

    return apply_env_overrides(config)


def apply_env_overrides(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Apply PAYSIM_* environment overrides to a loaded configuration

    Args:
        config: Configuration dictionary (modified in place)

    Returns:
        The same dictionary
    """
    processing = config.setdefault('processing', {}) or {}
    storage = config.setdefault('storage', {}) or {}
    config['processing'] = processing
    config['storage'] = storage

    if os.getenv("PAYSIM_TRANSACTION_FILE"):
        storage['transaction_file'] = os.getenv("PAYSIM_TRANSACTION_FILE")

    try:
        if os.getenv("PAYSIM_FAILURE_RATE"):
            processing['failure_rate'] = float(os.getenv("PAYSIM_FAILURE_RATE"))
        if os.getenv("PAYSIM_DELAY_SECONDS"):
            processing['delay_seconds'] = float(os.getenv("PAYSIM_DELAY_SECONDS"))
    except ValueError as e:
        raise ConfigurationError(f"Invalid numeric environment override: {e}")

    return config


def save_config(config_path: str, config: Dict[str, Any]) -> None:
    """
    Save configuration to YAML file

    Args:
        config_path: Path to configuration file
        config: Configuration dictionary

    Raises:
        ConfigurationError: If unable to write file
    """
    try:
        config_file = Path(config_path)
        config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(config_file, 'w', encoding='utf-8') as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)

    except OSError as e:
        raise ConfigurationError(f"Error saving configuration: {e}")


def get_processing_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Get processing simulation settings with defaults filled in

    Args:
        config: Full configuration dictionary

    Returns:
        Dictionary with 'delay_seconds' and 'failure_rate'
    """
    processing = config.get('processing') or {}
    return {
        'delay_seconds': float(processing.get('delay_seconds', DEFAULT_PROCESSING_DELAY_SECONDS)),
        'failure_rate': float(processing.get('failure_rate', DEFAULT_FAILURE_RATE)),
    }
