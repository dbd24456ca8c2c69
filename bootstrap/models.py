"""
Data model of the bootstrap sequence: launch inputs and the terminal result
"""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .exceptions import BootstrapError

if TYPE_CHECKING:
  from os_interfaces.base import Screen, Surface

  from .reporting import RegistrationReport


class PlatformCredential(BaseModel):
  """Secret fields one sharing platform needs (app id, secret, auth mode...)"""

  model_config = ConfigDict(frozen=True)

  # Pairs rather than a dict so the credential cannot be changed in place
  entries: tuple[tuple[str, str], ...] = ()

  @field_validator("entries", mode="before")
  @classmethod
  def stringify(cls, v: Any) -> Any:
    """YAML gives ints for numeric ids and None for blank values"""
    if isinstance(v, Mapping):
      return tuple((str(k), "" if val is None else str(val)) for k, val in v.items())
    return v

  @property
  def is_empty(self) -> bool:
    return not any(value.strip() for _, value in self.entries)

  def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
    return self.as_dict().get(key, default)

  def __getitem__(self, key: str) -> str:
    return self.as_dict()[key]

  def keys(self) -> list[str]:
    return sorted(key for key, _ in self.entries)

  def as_dict(self) -> dict[str, str]:
    """Copy of the entries; changing it does not affect the credential"""
    return dict(self.entries)

  def __repr__(self) -> str:
    # Never print secret values
    return f"PlatformCredential(keys={self.keys()})"

  __str__ = __repr__


class PlatformRegistrationRequest(BaseModel):
  """One platform to register at launch"""

  model_config = ConfigDict(frozen=True)

  platform: str
  credential: PlatformCredential = Field(default_factory=PlatformCredential)

  @field_validator("platform")
  @classmethod
  def validate_platform(cls, v: str) -> str:
    v = v.strip()
    if not v:
      raise ValueError("Platform name must not be empty")
    return v

  @field_validator("credential", mode="before")
  @classmethod
  def parse_credential(cls, v: Any) -> Any:
    match v:
      case PlatformCredential():
        return v
      case None:
        return PlatformCredential()
      case Mapping():
        return PlatformCredential(entries=v)
      case _:
        return v


class LaunchConfiguration(BaseModel):
  """Startup inputs, created once and never mutated"""

  model_config = ConfigDict(frozen=True)

  screen: str
  registrations: tuple[PlatformRegistrationRequest, ...] = ()

  @field_validator("screen")
  @classmethod
  def validate_screen(cls, v: str) -> str:
    v = v.strip()
    if not v:
      raise ValueError("Screen identifier must not be empty")
    return v

  @field_validator("registrations", mode="before")
  @classmethod
  def parse_registrations(cls, v: Any) -> Any:
    return () if v is None else v

  @model_validator(mode="after")
  def validate_unique_platforms(self):
    """Each platform gets one result slot, so it can only be requested once"""
    seen = set()
    for request in self.registrations:
      if request.platform in seen:
        raise ValueError(f"Platform '{request.platform}' requested more than once")
      seen.add(request.platform)
    return self

  @property
  def has_registrations(self) -> bool:
    return bool(self.registrations)


@dataclass(frozen=True)
class Ready:
  """Surface created and root screen showing"""

  surface: Surface
  screen: Screen
  registrations: RegistrationReport

  @property
  def ok(self) -> bool:
    return True


@dataclass(frozen=True)
class Failed:
  """Bootstrap stopped at a fatal step; nothing is shown"""

  stage: Literal["surface", "screen"]
  cause: BootstrapError

  @property
  def ok(self) -> bool:
    return False


BootstrapResult = Ready | Failed
