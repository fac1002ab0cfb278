"""
Configuration for Loco Advisor.

Settings are read from environment variables (a local .env file is loaded
first), and YAML data files shipped with the package are loaded through
load_yaml_config.
"""
import logging
import os
from typing import Optional

import yaml
from dotenv import load_dotenv

load_dotenv()

SERVICES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "services")


def _env_flag(name: str, default: str = "0") -> bool:
    return os.environ.get(name, default).lower() in ("1", "true", "yes")


LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Optional step-envelope endpoint
ENABLE_MCP = _env_flag("ENABLE_MCP")

# Resolver behaviour
LOCO_NUMERIC_FALLBACK = _env_flag("LOCO_NUMERIC_FALLBACK")
ENABLE_BATCH_RESOLUTION = _env_flag("ENABLE_BATCH_RESOLUTION")
MAX_DISAMBIGUATION_CANDIDATES = int(os.environ.get("MAX_DISAMBIGUATION_CANDIDATES", "5"))
SNAPSHOT_MAX_AGE_SECONDS = int(os.environ.get("SNAPSHOT_MAX_AGE_SECONDS", "300"))

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once for the application."""
    logging.basicConfig(level=level or LOG_LEVEL, format=LOG_FORMAT)


def load_yaml_config(filename: str, required_key: str = None) -> dict:
    """
    Load a YAML configuration file from the services directory.

    Args:
        filename: File name relative to loco_advisor/services
        required_key: Top-level key that must be present; its value is returned

    Returns:
        Parsed configuration (or the value under required_key)

    Raises:
        ValueError: If the file is empty or the required key is missing
    """
    filepath = os.path.join(SERVICES_DIR, filename)
    with open(filepath, "r", encoding="utf-8") as file:
        config = yaml.safe_load(file)
    if config is None:
        raise ValueError(f"Empty configuration file: {filename}")
    if required_key and required_key not in config:
        raise ValueError(f"Missing required key '{required_key}' in {filename}")
    return config[required_key] if required_key else config
