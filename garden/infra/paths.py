from pathlib import Path

from garden.utilities.config import DATA_DIR

# Centralized paths for data files (single source of truth)
PLANTS_FILE: Path = DATA_DIR / 'plants.json'
GARDENS_FILE: Path = DATA_DIR / 'gardens.json'

__all__ = ['DATA_DIR', 'PLANTS_FILE', 'GARDENS_FILE']
