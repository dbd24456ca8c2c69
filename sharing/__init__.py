"""Sharing / social login platform registration"""

from .platforms import (
  AuthType,
  PlatformConfig,
  SharePlatform,
  parse_platform_config,
)
from .registrar import ShareRegistrar
from .registry import PlatformRegistry

__all__ = [
  "AuthType",
  "PlatformConfig",
  "PlatformRegistry",
  "SharePlatform",
  "ShareRegistrar",
  "parse_platform_config",
]
