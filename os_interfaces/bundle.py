"""Screen provider backed by a directory of HTML pages"""

import logging
import threading
from pathlib import Path
from typing import Dict, Mapping, Optional

from bootstrap.config import AppConfig

from .base import Screen, ScreenProvider

logger = logging.getLogger(__name__)

DEFAULT_BUNDLE_DIR = Path(__file__).resolve().parent.parent / "resources"
SCREEN_SUFFIX = ".html"


class BundleScreenProvider(ScreenProvider):
  """Resolves screen identifiers to pages inside a bundle directory.

  The identifier → page mapping is owned by the provider: either passed in
  explicitly (values relative to the bundle directory) or built once from the
  `*.html` files in the bundle, keyed by file stem.
  """

  def __init__(
    self,
    bundle_dir: Optional[Path | str] = None,
    screens: Optional[Mapping[str, str]] = None,
  ):
    self.bundle_dir = Path(bundle_dir) if bundle_dir else self.default_bundle_dir()
    self._screens: Optional[Dict[str, str]] = dict(screens) if screens else None
    self._resolved: Dict[str, Optional[Screen]] = {}
    self._lock = threading.Lock()

  def default_bundle_dir(self) -> Path:
    return Path(AppConfig.BUNDLE_DIR) if AppConfig.BUNDLE_DIR else DEFAULT_BUNDLE_DIR

  @property
  def screens(self) -> Dict[str, str]:
    if self._screens is None:
      self._screens = self._scan()
    return dict(self._screens)

  def _scan(self) -> Dict[str, str]:
    if not self.bundle_dir.is_dir():
      logger.warning(f"Screen bundle not found: {self.bundle_dir}")
      return {}
    return {
      p.stem: p.name for p in sorted(self.bundle_dir.glob(f"*{SCREEN_SUFFIX}"))
    }

  def resolve(self, identifier: str) -> Optional[Screen]:
    with self._lock:
      if identifier not in self._resolved:
        self._resolved[identifier] = self._load(identifier)
      return self._resolved[identifier]

  def _load(self, identifier: str) -> Optional[Screen]:
    page = self.screens.get(identifier)
    if page is None:
      logger.warning(f"No screen named '{identifier}' in {self.bundle_dir}")
      return None

    path = self.bundle_dir / page
    if not path.is_file():
      logger.warning(f"Page for screen '{identifier}' is missing: {path}")
      return None

    logger.debug(f"Resolved screen '{identifier}' to {path}")
    return Screen(identifier=identifier, url=path.resolve().as_uri())
