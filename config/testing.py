import os

HOST = "127.0.0.1"
PORT = 3000

DATA_PATH = os.getenv("DATA_PATH", "data.test.json")
AUTO_SEED_DATA = True

API_BASE = ""
REMOTE_TIMEOUT = 1.0
STORAGE_NAMESPACE = "smartoffice_test_"

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
