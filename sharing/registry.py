"""In-process record of the platforms configured for sharing"""

import logging
from threading import Lock
from typing import Dict, Optional

from .platforms import PlatformConfig, SharePlatform

logger = logging.getLogger(__name__)


class PlatformRegistry:
  """Thread-safe map of registered platforms to their validated config"""

  def __init__(self):
    self._lock = Lock()
    self._platforms: Dict[SharePlatform, PlatformConfig] = {}

  def add(self, platform: SharePlatform, config: PlatformConfig) -> None:
    with self._lock:
      if platform in self._platforms:
        logger.info(f"Replacing registration of '{platform.value}'")
      self._platforms[platform] = config

  def get(self, platform: SharePlatform | str) -> Optional[PlatformConfig]:
    """Config of a registered platform, None if unregistered or unknown"""
    try:
      key = SharePlatform(platform)
    except ValueError:
      return None
    with self._lock:
      return self._platforms.get(key)

  def is_registered(self, platform: SharePlatform | str) -> bool:
    return self.get(platform) is not None

  def registered(self) -> list[SharePlatform]:
    with self._lock:
      return list(self._platforms)
