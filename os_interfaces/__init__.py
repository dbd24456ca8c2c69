"""OS interface module - platform-specific implementations

Since we build separate executables for each platform,
import the appropriate implementation directly in the entry points:
- entrypoints.launch_linux imports from os_interfaces.linux
- entrypoints.launch_android imports from os_interfaces.android
"""

from .base import OSImplementations, PlatformRegistrar, Screen, ScreenProvider, Surface

__all__ = [
  "OSImplementations",
  "PlatformRegistrar",
  "Screen",
  "ScreenProvider",
  "Surface",
]
