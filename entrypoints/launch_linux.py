"""Linux entrypoint for the desktop ShareLaunch app.

This entrypoint injects Linux OS interface implementations.

Usage:
    python -m entrypoints.launch_linux [--config PATH] [--plain | --check]
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional

import yaml

from bootstrap.config import AppConfig, load_launch_config, plain_launch_config
from entrypoints.launch_core import check_registrations, run_app
from os_interfaces.base import OSImplementations
from os_interfaces.bundle import BundleScreenProvider
from os_interfaces.linux import LinuxWebviewSurface
from sharing import ShareRegistrar

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[list[str]]) -> argparse.Namespace:
  parser = argparse.ArgumentParser(
    description="Launch ShareLaunch and register the configured sharing platforms."
  )
  parser.add_argument(
    "--config",
    help="Launch config YAML (default: launch.yaml in the user config dir)",
  )
  mode = parser.add_mutually_exclusive_group()
  mode.add_argument(
    "--plain",
    action="store_true",
    help="Show the screen without registering any sharing platform",
  )
  mode.add_argument(
    "--check",
    action="store_true",
    help="Only register the platforms and print the failures as JSON",
  )
  return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
  args = _parse_args(argv)

  os_impl = OSImplementations(
    surface_cls=LinuxWebviewSurface,
    screen_provider_cls=BundleScreenProvider,
    platform_registrar_cls=ShareRegistrar,
  )

  try:
    config = load_launch_config(args.config)
  except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
    logger.error(f"Error loading launch config: {e}")
    sys.exit(1)

  if args.plain:
    config = plain_launch_config(config)

  if args.check:
    try:
      records = check_registrations(
        os_impl=os_impl, config=config, timeout=AppConfig.CHECK_TIMEOUT
      )
    except TimeoutError:
      logger.error(
        f"Platform registration did not finish within {AppConfig.CHECK_TIMEOUT}s"
      )
      sys.exit(1)
    print(json.dumps([r.model_dump() for r in records], indent=2))
    sys.exit(1 if records else 0)

  run_app(os_impl=os_impl, config=config)


if __name__ == "__main__":
  main()
