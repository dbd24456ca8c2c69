"""Linux-specific implementations of OS interfaces"""

import logging
from pathlib import Path
from typing import Optional

from platformdirs import user_data_dir

from bootstrap.config import APP_NAME

from .webview_surface import WebviewSurface

logger = logging.getLogger(__name__)


class LinuxWebviewSurface(WebviewSurface):
  """Desktop window; webview profile kept in the user data dir"""

  def __init__(self, storage_path: Optional[Path | str] = None, **kwargs):
    if storage_path is None:
      storage_path = Path(user_data_dir(APP_NAME)) / "webview"
    super().__init__(storage_path=storage_path, **kwargs)
