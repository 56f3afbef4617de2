import os

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))

DATA_PATH = os.getenv("DATA_PATH", "data.json")
AUTO_SEED_DATA = bool(int(os.getenv("AUTO_SEED_DATA", "0")))

API_BASE = os.getenv("API_BASE", "")
REMOTE_TIMEOUT = float(os.getenv("REMOTE_TIMEOUT", "5"))
STORAGE_NAMESPACE = os.getenv("STORAGE_NAMESPACE", "smartoffice_")

ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "please-set-ADMIN_PASSWORD")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
