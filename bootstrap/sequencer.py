"""One-shot, ordered application bootstrap.

Contract:
- Inputs: a `LaunchConfiguration`, a surface factory, a `ScreenProvider` and a
  `PlatformRegistrar`.
- Behavior: creates the surface, resolves and shows the root screen, then
  registers sharing platforms in the background.
- Output: a terminal `Ready` or `Failed`. Registration failures never turn
  `Ready` into `Failed`; they are collected in `Ready.registrations`.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from typing import Callable, Iterable, Optional

from os_interfaces.base import PlatformRegistrar, Screen, ScreenProvider, Surface

from .exceptions import (
  BootstrapAlreadyRunError,
  RegistrationError,
  ScreenResolutionError,
  SurfaceError,
)
from .models import (
  BootstrapResult,
  Failed,
  LaunchConfiguration,
  PlatformRegistrationRequest,
  Ready,
)
from .reporting import RegistrationReport

logger = logging.getLogger(__name__)


class BootstrapSequencer:
  """Runs the startup sequence exactly once.

  A second call to `run` raises `BootstrapAlreadyRunError`; the result of the
  first call stays available as `result`.
  """

  def __init__(
    self,
    surface_factory: Callable[[], Surface],
    screen_provider: ScreenProvider,
    registrar: Optional[PlatformRegistrar] = None,
  ):
    self._surface_factory = surface_factory
    self._screen_provider = screen_provider
    self._registrar = registrar
    self._lock = threading.Lock()
    self._started = False
    self._result: Optional[BootstrapResult] = None
    self._worker: Optional[threading.Thread] = None

  @property
  def result(self) -> Optional[BootstrapResult]:
    return self._result

  def run(self, config: LaunchConfiguration) -> BootstrapResult:
    with self._lock:
      if self._started:
        raise BootstrapAlreadyRunError("Bootstrap sequence has already run")
      self._started = True
      self._result = self._run(config)
      return self._result

  def _run(self, config: LaunchConfiguration) -> BootstrapResult:
    logger.info("Starting bootstrap sequence...")

    try:
      surface = self._surface_factory()
    except Exception as e:
      logger.exception("Failed to create display surface")
      return Failed("surface", SurfaceError.from_exception(e, "Surface creation failed"))

    try:
      screen = self._show_screen(surface, config.screen)
    except ScreenResolutionError as e:
      logger.error(f"Failed to show screen '{config.screen}': {e.description}")
      return Failed("screen", e)

    report = RegistrationReport([r.platform for r in config.registrations])
    if config.has_registrations:
      self._start_registrations(config, report)

    logger.info(f"Bootstrap complete, showing '{screen.identifier}'")
    return Ready(surface=surface, screen=screen, registrations=report)

  def _show_screen(self, surface: Surface, identifier: str) -> Screen:
    try:
      screen = self._screen_provider.resolve(identifier)
    except Exception as e:
      raise ScreenResolutionError.from_exception(
        identifier, e, f"Failed to load screen '{identifier}'"
      ) from e
    if screen is None:
      raise ScreenResolutionError(identifier, f"Unknown screen '{identifier}'")

    try:
      surface.attach(screen)
      surface.make_key_and_visible()
    except Exception as e:
      raise ScreenResolutionError.from_exception(
        identifier, e, f"Failed to attach screen '{identifier}'"
      ) from e
    return screen

  # ---- platform registration ----
  def _start_registrations(
    self, config: LaunchConfiguration, report: RegistrationReport
  ) -> None:
    if self._registrar is None:
      # Nothing can register, so every request fails rather than being dropped
      report.fail_pending("no platform registrar configured")
      return

    registrations = register_platforms(self._registrar, config.registrations, report)
    try:
      self._worker = threading.Thread(
        target=asyncio.run,
        args=(registrations,),
        daemon=True,
        name="Platform-Registration",
      )
      self._worker.start()
    except Exception as e:
      logger.exception("Failed to start platform registration")
      registrations.close()
      self._worker = None
      report.fail_pending(f"registration worker did not start: {e}")


async def register_platforms(
  registrar: PlatformRegistrar,
  requests: Iterable[PlatformRegistrationRequest],
  report: RegistrationReport,
) -> None:
  """Register each platform in order, recording every outcome in `report`.

  One platform failing never stops the ones after it, and every platform in
  `report` has a result when this returns or raises.
  """
  try:
    for request in requests:
      logger.info(f"Registering platform '{request.platform}'")
      try:
        await registrar.register(request.platform, request.credential)
      except RegistrationError as e:
        report.record_failure(request.platform, e)
      except asyncio.CancelledError:
        report.record_failure(
          request.platform,
          RegistrationError(request.platform, "registration was cancelled"),
        )
        task = asyncio.current_task()
        if task is not None and task.cancelling():
          # The whole run is being cancelled, not just this registrar call
          raise
      except Exception as e:
        logger.exception(f"Registrar raised unexpected error for '{request.platform}'")
        report.record_failure(
          request.platform, RegistrationError.from_exception(request.platform, e)
        )
      else:
        report.record_success(request.platform)
  finally:
    report.fail_pending("registration did not run")
