"""pywebview-backed display surface shared by the desktop and Android builds"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import webview

from bootstrap.config import AppConfig

from .base import Screen, Surface

logger = logging.getLogger(__name__)


class WebviewSurface(Surface):
  """One pywebview window showing the root screen's page.

  The native window is created when the surface is made visible; pywebview
  only opens it once `run` starts the GUI loop.
  """

  def __init__(
    self,
    storage_path: Path | str,
    title: Optional[str] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
    debug: Optional[bool] = None,
  ):
    self.title = title or AppConfig.WINDOW_TITLE
    self.width = width or AppConfig.WINDOW_WIDTH
    self.height = height or AppConfig.WINDOW_HEIGHT
    self.debug = AppConfig.WEBVIEW_DEBUG if debug is None else debug
    self.storage_path = Path(storage_path).expanduser()
    # Webview profile (cookies, local storage) lives here
    self.storage_path.mkdir(parents=True, exist_ok=True)
    self._screen: Optional[Screen] = None
    self._window: Optional[webview.Window] = None

  @property
  def screen(self) -> Optional[Screen]:
    return self._screen

  @property
  def window(self) -> Optional[webview.Window]:
    return self._window

  def attach(self, screen: Screen) -> None:
    self._screen = screen
    if self._window is not None:
      self._window.load_url(screen.url)
    logger.debug(f"Attached screen '{screen.identifier}'")

  def make_key_and_visible(self) -> None:
    if self._screen is None:
      raise RuntimeError("No screen attached to surface")

    if self._window is None:
      self._window = webview.create_window(
        title=self.title,
        url=self._screen.url,
        width=self.width,
        height=self.height,
        resizable=True,
        fullscreen=False,
        min_size=(320, 480),
      )
    else:
      self._window.show()
    logger.info(f"Surface '{self.title}' showing '{self._screen.identifier}'")

  def run(self) -> None:
    if self._window is None:
      raise RuntimeError("Surface was never made visible")

    logger.info("Starting pywebview...")
    webview.start(
      debug=self.debug, private_mode=False, storage_path=str(self.storage_path)
    )
    logger.info("Window closed")
