"""App bootstrap sequence"""

from .exceptions import (
  BootstrapAlreadyRunError,
  BootstrapError,
  RegistrationError,
  ScreenResolutionError,
  SurfaceError,
)
from .models import (
  BootstrapResult,
  Failed,
  LaunchConfiguration,
  PlatformCredential,
  PlatformRegistrationRequest,
  Ready,
)
from .reporting import RegistrationReport

__all__ = [
  "BootstrapAlreadyRunError",
  "BootstrapError",
  "BootstrapResult",
  "Failed",
  "LaunchConfiguration",
  "PlatformCredential",
  "PlatformRegistrationRequest",
  "Ready",
  "RegistrationError",
  "RegistrationReport",
  "ScreenResolutionError",
  "SurfaceError",
]
