#!/usr/bin/env python3

import os
import json
import tomllib
from pathlib import Path

import logging
import sys

import yaml

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
    handlers=[
        logging.StreamHandler(sys.stderr) # Default to stderr
    ]
)
logger = logging.getLogger("ghactivity")

CONFIG_FILENAMES = ['config.json', 'config.toml', 'config.yaml', 'config.yml']


def get_config_path():
    """Get the path to the configuration file.

    Checks in order:
    1. GHACTIVITY_CONFIG environment variable
    2. ~/.ghactivity/ directory
    """
    if 'GHACTIVITY_CONFIG' in os.environ:
        path = Path(os.environ['GHACTIVITY_CONFIG'])
        if path.exists():
            return path

    config_dir = Path.home() / '.ghactivity'
    for filename in CONFIG_FILENAMES:
        path = config_dir / filename
        if path.exists():
            return path

    # If no file exists, return default path
    return config_dir / 'config.json'


def load_config():
    """Load configuration from file."""
    config_path = get_config_path()

    # Start with default config
    config = get_default_config()

    # Load from file if it exists
    if config_path.exists():
        try:
            if config_path.suffix.lower() in ['.toml']:
                with open(config_path, 'rb') as f:
                    file_config = tomllib.load(f)
            elif config_path.suffix.lower() in ['.yaml', '.yml']:
                with open(config_path, 'r') as f:
                    file_config = yaml.safe_load(f) or {}
            else:
                # Default to JSON format
                with open(config_path, 'r') as f:
                    file_config = json.load(f)

            # Merge file config with defaults
            if isinstance(file_config, dict):
                config = merge_configs(config, file_config)
            else:
                logger.error(f"Ignoring config {config_path}: top level must be a mapping")
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Error loading config from {config_path}: {e}")

    # Apply environment variable overrides
    config = apply_env_overrides(config)
    config = check_config(config)

    # Token falls back to the conventional variable
    if not config['github'].get('token'):
        config['github']['token'] = os.environ.get('GITHUB_TOKEN', '')

    return config


def get_default_config():
    """Get default configuration."""
    return {
        "github": {
            "api_base": "https://api.github.com",
            "user_agent": "github-activity-cli/1.0",
            "token": "",
            "timeout_seconds": 30,
        },
        "logging": {
            "level": "INFO",
        },
    }


def configure_logging(config, verbose=False):
    """Apply the configured log level to the package logger."""
    if verbose:
        logger.setLevel(logging.DEBUG)
        return

    level_name = str(config.get('logging', {}).get('level', 'INFO')).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        logger.warning(f"Unknown log level {level_name!r}, using INFO")
        level = logging.INFO
    logger.setLevel(level)


def check_config(config):
    """Replace sections and github values of the wrong type with defaults.

    A file may parse cleanly and still hold e.g. ``github: null`` or a
    string timeout; each such value is logged and reset.
    """
    defaults = get_default_config()

    for section, default_section in defaults.items():
        if not isinstance(config.get(section), dict):
            logger.error(f"Config section '{section}' must be a mapping, using defaults")
            config[section] = default_section

    github = config['github']
    for key in ('api_base', 'user_agent', 'token'):
        if not isinstance(github.get(key), str):
            logger.error(f"Config value github.{key} must be a string, using default")
            github[key] = defaults['github'][key]

    timeout = github.get('timeout_seconds')
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        logger.error(f"Config value github.timeout_seconds must be a positive number, got {timeout!r}")
        github['timeout_seconds'] = defaults['github']['timeout_seconds']

    return config


def merge_configs(base_config, override_config):
    """Recursively merge override_config into a copy of base_config."""
    merged = base_config.copy()

    for key, value in override_config.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = value

    return merged


def _coerce_env_value(value):
    if value.lower() in ('true', 'yes', 'on'):
        return True
    if value.lower() in ('false', 'no', 'off'):
        return False
    if value.isdigit():
        return int(value)
    return value


def apply_env_overrides(config):
    """
    Apply GHACTIVITY_<SECTION>_<KEY> environment variables to config.

    Keys may contain underscores (GHACTIVITY_GITHUB_TIMEOUT_SECONDS), so at
    each level the longest existing key matching the remaining parts wins.
    Variables naming no existing key are ignored.
    """
    env_prefix = "GHACTIVITY_"

    for env_key, value in os.environ.items():
        if not env_key.startswith(env_prefix):
            continue

        key_parts = env_key[len(env_prefix):].lower().split('_')
        current_level = config
        i = 0
        while i < len(key_parts) and isinstance(current_level, dict):
            matched_key = None
            for config_key in current_level:
                config_key_parts = config_key.split('_')
                if key_parts[i:i + len(config_key_parts)] == config_key_parts:
                    if matched_key is None or len(config_key_parts) > len(matched_key.split('_')):
                        matched_key = config_key

            if matched_key is None:
                break

            i += len(matched_key.split('_'))
            if i == len(key_parts):
                current_level[matched_key] = _coerce_env_value(value)
                break
            current_level = current_level[matched_key]

    return config
