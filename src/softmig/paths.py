from pathlib import Path

# src/softmig/paths.py -> src/softmig
PACKAGE_ROOT = Path(__file__).resolve().parent

# Bundled instances
DATA_DIR = PACKAGE_ROOT / "data"
SAMPLE_INSTANCE = DATA_DIR / "software-migration-data.txt"
