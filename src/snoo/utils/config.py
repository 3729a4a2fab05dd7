"""Configuration management for snoo"""

import os
import json
from pathlib import Path
from typing import Dict, Any, Optional
from dotenv import load_dotenv

from .reddit_client import DEFAULT_BASE_URL, USER_AGENT, RedditClient

# Load environment variables
load_dotenv()

DEFAULT_CONFIG = {
    "base_url": DEFAULT_BASE_URL,
    "access_token": None,
    "user_agent": USER_AGENT,
    "timeout": 15,  # seconds
    "log_level": "WARNING",
}

ENV_OVERRIDES = {
    "REDDIT_BASE_URL": "base_url",
    "REDDIT_ACCESS_TOKEN": "access_token",
    "REDDIT_USER_AGENT": "user_agent",
    "REDDIT_TIMEOUT": "timeout",
    "SNOO_LOG_LEVEL": "log_level",
}


def get_config_path() -> Path:
    """Get the configuration file path"""
    # Check for local config first
    local_config = Path(".snoorc")
    if local_config.exists():
        return local_config

    # Then check home directory
    home_config = Path.home() / ".snoorc"
    return home_config


def load_config() -> Dict[str, Any]:
    """Load configuration from file and environment"""
    config = DEFAULT_CONFIG.copy()

    # Load from config file if it exists
    config_path = get_config_path()
    if config_path.exists():
        try:
            with open(config_path, "r") as f:
                file_config = json.load(f)
            if isinstance(file_config, dict):
                config.update(file_config)
        except (json.JSONDecodeError, OSError):
            pass  # Use defaults if config is invalid

    # Override with environment variables
    for env_name, key in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            config[key] = value

    config["timeout"] = _parse_timeout(config["timeout"])
    return config


def _parse_timeout(value: Any) -> float:
    """Seconds as a float; anything unusable falls back to the default"""
    try:
        return float(value)
    except (TypeError, ValueError):
        return float(DEFAULT_CONFIG["timeout"])


def save_config(config: Dict[str, Any], path: Optional[Path] = None):
    """Save configuration to file"""
    config_path = path or get_config_path()
    with open(config_path, "w") as f:
        json.dump(config, f, indent=2)


def get_reddit_client(config: Optional[Dict[str, Any]] = None) -> RedditClient:
    """Get a configured Reddit transport"""
    config = config or load_config()
    return RedditClient(
        base_url=config["base_url"],
        access_token=config.get("access_token"),
        user_agent=config.get("user_agent") or USER_AGENT,
        timeout=config["timeout"],
    )
