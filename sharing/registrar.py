"""
Sharing platform registrar

Checks each platform credential against the platform's schema and records
the platform as available for sharing and social login.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from bootstrap.exceptions import RegistrationError
from bootstrap.models import PlatformCredential
from os_interfaces.base import PlatformRegistrar

from .platforms import SharePlatform, parse_platform_config
from .registry import PlatformRegistry

logger = logging.getLogger(__name__)


def _summarize(e: ValidationError) -> str:
  return "; ".join(
    f"{'.'.join(str(part) for part in err['loc']) or 'credential'}: {err['msg']}"
    for err in e.errors()
  )


class ShareRegistrar(PlatformRegistrar):
  """Registers sharing platforms into a `PlatformRegistry`"""

  def __init__(self, registry: Optional[PlatformRegistry] = None):
    self.registry = registry if registry is not None else PlatformRegistry()

  async def register(self, name: str, credential: PlatformCredential) -> None:
    if credential.is_empty:
      raise RegistrationError(name, "credential is empty")

    try:
      platform = SharePlatform(name)
    except ValueError as e:
      known = ", ".join(p.value for p in SharePlatform)
      raise RegistrationError(
        name, f"unknown platform (expected one of: {known})"
      ) from e

    try:
      config = parse_platform_config(platform, credential.as_dict())
    except ValidationError as e:
      raise RegistrationError(
        name, f"invalid credential: {_summarize(e)}", caused_by="ValidationError"
      ) from e

    self.registry.add(platform, config)
    logger.debug(f"Platform '{name}' configured with fields {credential.keys()}")
