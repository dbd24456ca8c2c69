"""Platform-agnostic app launch.

The platform-specific entrypoints (Linux/Android) should import this module and
provide the correct OS-interface implementations.

Contract:
- Inputs: an os-interface bundle `os_impl` and a `LaunchConfiguration`.
- Behavior: runs the bootstrap sequence once, then enters the window's event loop.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Optional

from bootstrap.config import AppConfig
from bootstrap.exceptions import ErrorRecord
from bootstrap.models import BootstrapResult, Failed, LaunchConfiguration, Ready
from bootstrap.reporting import RegistrationReport
from bootstrap.sequencer import BootstrapSequencer, register_platforms
from os_interfaces.base import OSImplementations

logging.basicConfig(
  level=logging.DEBUG if AppConfig.WEBVIEW_DEBUG else AppConfig.LOG_LEVEL,
  format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


class AppLauncher:
  """Equivalent of the OS "did finish launching" callback"""

  def __init__(self, os_impl: OSImplementations, config: LaunchConfiguration):
    self.config = config
    self.sequencer = BootstrapSequencer(
      surface_factory=os_impl.surface,
      screen_provider=os_impl.screen_provider(),
      registrar=os_impl.platform_registrar(),
    )

  @property
  def result(self) -> Optional[BootstrapResult]:
    return self.sequencer.result

  def launch(self) -> bool:
    """Run the bootstrap sequence.

    Returns:
      True if the surface was created and the root screen attached.
      Platform registration outcomes do not affect the return value.
    """
    result = self.sequencer.run(self.config)
    if isinstance(result, Failed):
      logger.error(f"Launch failed at '{result.stage}': {result.cause.description}")
      return False
    return True


def run_app(*, os_impl: OSImplementations, config: LaunchConfiguration) -> None:
  logger.info("Starting ShareLaunch...")

  launcher = AppLauncher(os_impl, config)
  if not launcher.launch():
    sys.exit(1)

  result = launcher.result
  assert isinstance(result, Ready)
  result.surface.run()

  if not result.registrations.done():
    logger.info("Exiting before platform registration finished")
  logger.info("ShareLaunch closed. Exiting...")


def check_registrations(
  *,
  os_impl: OSImplementations,
  config: LaunchConfiguration,
  timeout: Optional[float] = None,
) -> list[ErrorRecord]:
  """Register the configured platforms without opening a window.

  Returns:
    One record per platform that failed to register

  Raises:
    TimeoutError: If registration does not finish within `timeout`
  """
  report = RegistrationReport([r.platform for r in config.registrations])
  asyncio.run(
    asyncio.wait_for(
      register_platforms(os_impl.platform_registrar(), config.registrations, report),
      timeout=timeout,
    )
  )
  return report.records(timeout=0)
