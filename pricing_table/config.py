"""Configuration : variables d'environnement + valeurs par défaut."""
import os
from pathlib import Path

BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"

DB_PATH      = os.getenv("PRICING_TABLE_DB_PATH", str(DATA_DIR / "pricing_table.db"))
CLASS_PREFIX = os.getenv("PRICING_TABLE_CLASS_PREFIX", "app-pricing")
LOG_LEVEL    = os.getenv("PRICING_TABLE_LOG_LEVEL", "INFO")
