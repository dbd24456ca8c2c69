"""Shared pytest setup"""

import sys
from pathlib import Path

# Add repo root to path so the top-level packages import without installing
sys.path.insert(0, str(Path(__file__).parent.parent))
