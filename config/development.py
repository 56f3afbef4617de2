import os

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "3000"))

# Flat JSON file the REST backend persists to
DATA_PATH = os.getenv("DATA_PATH", "data.json")
# Seed the bootstrap dataset on first start
AUTO_SEED_DATA = bool(int(os.getenv("AUTO_SEED_DATA", "1")))

# Client side: remote backend base URL, empty = local-only mode
API_BASE = os.getenv("API_BASE", "")
REMOTE_TIMEOUT = float(os.getenv("REMOTE_TIMEOUT", "5"))
STORAGE_NAMESPACE = os.getenv("STORAGE_NAMESPACE", "smartoffice_")

# Demo credentials, not for production use
ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
