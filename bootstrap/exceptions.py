"""
Exceptions raised while bootstrapping the app
"""

from typing import Literal, Optional, cast
from pydantic import BaseModel, Field


# Steps of the bootstrap sequence an error can come from
BootstrapStage = Literal[
  "surface",  # Display surface creation
  "screen",  # Root screen resolution and attachment
  "registration",  # Sharing platform registration
]


def is_fatal(stage: BootstrapStage) -> bool:
  """Whether an error in this stage stops the app from showing a screen"""
  return stage in ("surface", "screen")


class ErrorRecord(BaseModel):
  """Serializable view of a bootstrap error"""

  description: str = Field(..., description="Human-readable error message")
  stage: BootstrapStage = Field(..., description="Bootstrap step that failed")
  platform: Optional[str] = Field(
    None, description="Platform name for registration errors"
  )
  caused_by: Optional[str] = Field(
    None, description="Original error details if this is a chained error"
  )


class BootstrapError(Exception):
  """
  Base class for errors produced by the bootstrap sequence.
  """

  def __init__(
    self,
    description: str,
    stage: BootstrapStage,
    caused_by: Optional[str] = None,
  ):
    """
    Args:
        description: Human-readable error message
        stage: Bootstrap step the error belongs to
        caused_by: Original error details if this wraps another error
    """
    self.description: str = description
    self.stage: BootstrapStage = stage
    self.caused_by: Optional[str] = caused_by
    super().__init__(description)

  @property
  def fatal(self) -> bool:
    return is_fatal(self.stage)

  def to_record(self) -> ErrorRecord:
    return ErrorRecord(
      description=self.description,
      stage=cast(BootstrapStage, self.stage),
      platform=getattr(self, "platform", None),
      caused_by=self.caused_by,
    )

  @staticmethod
  def _describe(e: Exception, context: Optional[str]) -> tuple[str, str]:
    original_msg = str(e)
    description = f"{context}: {original_msg}" if context else original_msg
    return description, f"{e.__class__.__name__}: {original_msg}"


class SurfaceError(BootstrapError):
  """The display surface could not be created"""

  def __init__(self, description: str, caused_by: Optional[str] = None):
    super().__init__(description, "surface", caused_by)

  @classmethod
  def from_exception(cls, e: Exception, context: Optional[str] = None) -> "SurfaceError":
    description, caused_by = cls._describe(e, context)
    return cls(description, caused_by=caused_by)


class ScreenResolutionError(BootstrapError):
  """The root screen is unknown or could not be loaded"""

  def __init__(
    self, identifier: str, description: str, caused_by: Optional[str] = None
  ):
    self.identifier = identifier
    super().__init__(description, "screen", caused_by)

  @classmethod
  def from_exception(
    cls, identifier: str, e: Exception, context: Optional[str] = None
  ) -> "ScreenResolutionError":
    description, caused_by = cls._describe(e, context)
    return cls(identifier, description, caused_by=caused_by)


class RegistrationError(BootstrapError):
  """
  A sharing platform could not be registered.

  Never fatal: the app keeps running without that platform.
  """

  def __init__(self, platform: str, reason: str, caused_by: Optional[str] = None):
    self.platform = platform
    self.reason = reason
    super().__init__(f"Platform '{platform}': {reason}", "registration", caused_by)

  @classmethod
  def from_exception(cls, platform: str, e: Exception) -> "RegistrationError":
    _, caused_by = cls._describe(e, None)
    return cls(platform, str(e) or e.__class__.__name__, caused_by=caused_by)


class BootstrapAlreadyRunError(RuntimeError):
  """Raised when a sequencer is asked to run a second time"""
