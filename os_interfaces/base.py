"""Abstract base classes for the collaborators the bootstrap sequence drives"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Optional

from bootstrap.models import PlatformCredential


@dataclass(frozen=True)
class Screen:
  """Root UI unit shown inside a surface"""

  identifier: str
  url: str


class Surface(ABC):
  """Top-level window the app attaches its root screen to"""

  @property
  @abstractmethod
  def screen(self) -> Optional[Screen]:
    """Screen currently attached, if any"""
    raise NotImplementedError

  @abstractmethod
  def attach(self, screen: Screen) -> None:
    """Make `screen` the root screen of this surface"""
    raise NotImplementedError

  @abstractmethod
  def make_key_and_visible(self) -> None:
    """Show the surface with its attached screen

    Raises:
      RuntimeError: If no screen is attached
    """
    raise NotImplementedError

  @abstractmethod
  def run(self) -> None:
    """Enter the UI event loop. Blocks until the surface is closed."""
    raise NotImplementedError


class ScreenProvider(ABC):
  """Resolves screen identifiers to screens"""

  @abstractmethod
  def resolve(self, identifier: str) -> Optional[Screen]:
    """Resolve a screen by identifier

    Must return the same screen for the same identifier within one process.

    Args:
      identifier: Screen identifier, e.g. "MainAppViewController"

    Returns:
      The screen, or None if the identifier is unknown or fails to load
    """
    raise NotImplementedError


class PlatformRegistrar(ABC):
  """Registers external sharing platforms with their credentials"""

  @abstractmethod
  async def register(self, name: str, credential: PlatformCredential) -> None:
    """Register one platform

    Args:
      name: Platform name, e.g. "wechat"
      credential: Secret fields the platform needs

    Raises:
      RegistrationError: If the platform could not be registered
    """
    raise NotImplementedError


@dataclass
class OSImplementations:
  """Platform-specific collaborator classes, chosen by each entrypoint"""

  surface_cls: Callable[..., Surface]
  screen_provider_cls: Callable[..., ScreenProvider]
  platform_registrar_cls: Callable[..., PlatformRegistrar]

  def surface(self, **kwargs: Any) -> Surface:
    return self.surface_cls(**kwargs)

  def screen_provider(self, **kwargs: Any) -> ScreenProvider:
    return self.screen_provider_cls(**kwargs)

  def platform_registrar(self, **kwargs: Any) -> PlatformRegistrar:
    return self.platform_registrar_cls(**kwargs)
