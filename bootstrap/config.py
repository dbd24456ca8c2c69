"""
Configuration module for ShareLaunch
Loads the launch configuration and injects platform credentials from the environment
"""

import logging
import os
import re
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv
from platformdirs import user_config_dir

from .models import LaunchConfiguration, PlatformRegistrationRequest

logger = logging.getLogger(__name__)

# Load environment variables from .env file
load_dotenv()

APP_NAME = "sharelaunch"
CONFIG_FILE_NAME = "launch.yaml"
DEFAULT_SCREEN = "MainAppViewController"

# Placeholder credential for the default sharing platform.
# Real deployments provide these through the environment or a .env file.
WECHAT_APP_ID_ENV = "SHARE_WECHAT_APP_ID"
WECHAT_APP_SECRET_ENV = "SHARE_WECHAT_APP_SECRET"

_ENV_REFERENCE = re.compile(r"^\$\{(\w+)\}$")


def inject_env(value: Any) -> Any:
  """Replace a `${VAR}` value with the environment variable (empty if unset)"""
  if not isinstance(value, str):
    return value
  match = _ENV_REFERENCE.match(value.strip())
  if not match:
    return value
  var = match.group(1)
  resolved = os.getenv(var, "")
  if not resolved:
    logger.warning(f"Environment variable '{var}' is not set, using empty value")
  return resolved


def default_config_path() -> Path:
  return Path(user_config_dir(APP_NAME)) / CONFIG_FILE_NAME


def default_launch_config() -> LaunchConfiguration:
  """Main screen plus a WeChat registration with a placeholder credential"""
  return LaunchConfiguration(
    screen=DEFAULT_SCREEN,
    registrations=(
      PlatformRegistrationRequest(
        platform="wechat",
        credential={
          "app_id": os.getenv(WECHAT_APP_ID_ENV, ""),
          "app_secret": os.getenv(WECHAT_APP_SECRET_ENV, ""),
        },
      ),
    ),
  )


def plain_launch_config(config: LaunchConfiguration) -> LaunchConfiguration:
  """Same screen, no platform registrations"""
  return LaunchConfiguration(screen=config.screen)


def parse_launch_config(config_path: Path | str) -> LaunchConfiguration:
  """
  Parse the launch configuration from a YAML file

  Args:
      config_path: Path to the YAML configuration file

  Returns:
      LaunchConfiguration with credentials injected from the environment

  Raises:
      FileNotFoundError: If config file doesn't exist
      yaml.YAMLError: If YAML is malformed
      ValueError: If the top level is not a mapping
      pydantic.ValidationError: If config doesn't match schema
  """
  config_path = Path(config_path)

  if not config_path.exists():
    raise FileNotFoundError(f"Configuration file not found: {config_path}")

  with open(config_path, "r") as f:
    raw_config = yaml.safe_load(f) or {}

  if not isinstance(raw_config, dict):
    raise ValueError(f"Expected a mapping at the top of {config_path}")

  registrations = []
  for entry in raw_config.get("registrations") or []:
    match entry:
      case {"credential": dict() as credential, **rest}:
        entry = {
          **rest,
          "credential": {k: inject_env(v) for k, v in credential.items()},
        }
      case _:
        pass
    registrations.append(entry)

  return LaunchConfiguration(
    screen=raw_config.get("screen", DEFAULT_SCREEN),
    registrations=registrations,
  )


def load_launch_config(config_path: Optional[Path | str] = None) -> LaunchConfiguration:
  """Load the launch configuration, falling back to the built-in default"""
  path = Path(config_path) if config_path else default_config_path()
  if not path.exists():
    if config_path:
      raise FileNotFoundError(f"Configuration file not found: {path}")
    logger.warning(f"No launch config at {path}, using defaults")
    return default_launch_config()

  logger.info(f"Loading launch config from {path}")
  return parse_launch_config(path)


def _env_flag(name: str) -> bool:
  return os.getenv(name, "").strip().lower() in {"1", "true"}


class AppConfig:
  """Application configuration settings"""

  # Window settings
  WINDOW_TITLE = os.getenv("SHARELAUNCH_WINDOW_TITLE", "ShareLaunch")
  WINDOW_WIDTH = int(os.getenv("SHARELAUNCH_WINDOW_WIDTH", "390"))
  WINDOW_HEIGHT = int(os.getenv("SHARELAUNCH_WINDOW_HEIGHT", "844"))
  WEBVIEW_DEBUG = _env_flag("SHARELAUNCH_WEBVIEW_DEBUG")

  # Screen bundle; None means the platform default
  BUNDLE_DIR = os.getenv("SHARELAUNCH_BUNDLE_DIR")

  # Seconds `--check` waits for registrations to finish
  CHECK_TIMEOUT = float(os.getenv("SHARELAUNCH_CHECK_TIMEOUT", "10"))

  # Logging
  LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
