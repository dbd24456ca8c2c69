"""Android-specific implementations of OS interfaces."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from jnius import autoclass  # type: ignore

from bootstrap.config import AppConfig

from .bundle import BundleScreenProvider
from .webview_surface import WebviewSurface

logger = logging.getLogger(__name__)


# --- PyJNIus handles ---
PythonActivity = autoclass("org.kivy.android.PythonActivity")


def _files_dir() -> Path:
  """App-private files directory of the running activity"""
  context = PythonActivity.mActivity.getApplicationContext()
  return Path(context.getFilesDir().getAbsolutePath())


class AndroidWebviewSurface(WebviewSurface):
  """Full-screen activity window; webview profile kept in app-private storage"""

  def __init__(self, storage_path: Optional[Path | str] = None, **kwargs):
    if storage_path is None:
      storage_path = _files_dir() / "webview"
    super().__init__(storage_path=storage_path, **kwargs)


class AndroidBundleScreenProvider(BundleScreenProvider):
  """Screens unpacked with the app's private files"""

  def default_bundle_dir(self) -> Path:
    if AppConfig.BUNDLE_DIR:
      return super().default_bundle_dir()
    bundle_dir = _files_dir() / "app" / "resources"
    logger.debug(f"Using Android screen bundle at {bundle_dir}")
    return bundle_dir
