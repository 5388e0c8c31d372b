from pathlib import Path

from grocer.utilities.config import DATA_DIR as _CONFIGURED_DATA_DIR

# Centralized data location (single source of truth)
DATA_DIR = Path(_CONFIGURED_DATA_DIR).resolve()

__all__ = ['DATA_DIR']
