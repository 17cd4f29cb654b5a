from pathlib import Path

from .__about__ import __version__

REGISTRY_URL = "https://crates.io/api/v1/crates"
LIBRARY_NAME = "krate"
UNIQUE_USER_AGENT = f"{LIBRARY_NAME}/{__version__}"

# seconds, handed to httpx
DEFAULT_TIMEOUT = 10.0

# only the command line front end reads these
CONFIG_DIR = Path.home() / ".krate"
SETTINGS_FILE = CONFIG_DIR / "settings.json"
