"""Android entrypoint for the packaged ShareLaunch app.

Injects Android OS interfaces into the shared launch sequence.
"""

from __future__ import annotations

from bootstrap.config import load_launch_config
from entrypoints.launch_core import run_app
from os_interfaces.android import AndroidBundleScreenProvider, AndroidWebviewSurface
from os_interfaces.base import OSImplementations
from sharing import ShareRegistrar


def main() -> None:
  os_impl = OSImplementations(
    surface_cls=AndroidWebviewSurface,
    screen_provider_cls=AndroidBundleScreenProvider,
    platform_registrar_cls=ShareRegistrar,
  )
  run_app(os_impl=os_impl, config=load_launch_config())


if __name__ == "__main__":
  main()
