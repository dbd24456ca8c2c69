"""
Collects the outcome of sharing platform registrations.

Registrations run in the background after the app is already showing, so
each requested platform gets one result slot (a Future) that the worker
writes exactly once. Readers block on the slots they need.
"""

import logging
from concurrent.futures import Future, InvalidStateError
from concurrent.futures import TimeoutError as FutureTimeoutError
from concurrent.futures import wait as wait_futures
from typing import Dict, List, Optional

from .exceptions import ErrorRecord, RegistrationError

logger = logging.getLogger(__name__)


class RegistrationReport:
  """Per-platform registration results, written once by the registration worker"""

  def __init__(self, platforms: List[str]):
    self._slots: Dict[str, Future] = {}
    for name in platforms:
      if name in self._slots:
        raise ValueError(f"Platform '{name}' requested more than once")
      self._slots[name] = Future()

  @property
  def platforms(self) -> List[str]:
    return list(self._slots)

  def record_success(self, platform: str) -> None:
    self._write(platform, None)
    logger.info(f"Platform '{platform}' registered")

  def record_failure(self, platform: str, error: RegistrationError) -> None:
    self._write(platform, error)
    logger.warning(f"Platform '{platform}' registration failed: {error.reason}")

  def fail_pending(self, reason: str) -> None:
    """Record a failure for every platform that has no result yet"""
    for platform, slot in self._slots.items():
      if not slot.done():
        self.record_failure(platform, RegistrationError(platform, reason))

  def _write(self,platform: str, outcome: Optional[RegistrationError]) -> None:
    slot = self._slots[platform]
    try:
      slot.set_result(outcome)
    except InvalidStateError as e:
      raise RuntimeError(f"Result for platform '{platform}' already recorded") from e

  def done(self) -> bool:
    """True once every platform has a result"""
    return all(slot.done() for slot in self._slots.values())

  def wait(self, timeout: Optional[float] = None) -> bool:
    """
    Block until every platform has a result

    Returns:
      False if the timeout expired first
    """
    _, pending = wait_futures(list(self._slots.values()), timeout=timeout)
    return not pending

  def outcome(
    self, platform: str, timeout: Optional[float] = None
  ) -> Optional[RegistrationError]:
    """Error for one platform, or None if it registered successfully"""
    try:
      return self._slots[platform].result(timeout=timeout)
    except FutureTimeoutError as e:
      raise TimeoutError(f"Platform '{platform}' has no result yet") from e

  def errors(self, timeout: Optional[float] = None) -> List[RegistrationError]:
    """
    All registration errors in request order.

    Raises:
      TimeoutError: If some platform has no result within the timeout
    """
    if not self.wait(timeout):
      raise TimeoutError("Platform registration still in progress")
    return [
      error
      for error in (slot.result() for slot in self._slots.values())
      if error is not None
    ]

  def records(self, timeout: Optional[float] = None) -> List[ErrorRecord]:
    return [error.to_record() for error in self.errors(timeout)]

  def __repr__(self) -> str:
    finished = sum(slot.done() for slot in self._slots.values())
    return f"RegistrationReport({finished}/{len(self._slots)} finished)"
