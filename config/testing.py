import os

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
PORT = 3090

STORAGE_BACKEND = "json"
DATA_DIR = os.getenv("DATA_DIR", "data")
SETTINGS_FILE = os.getenv("SETTINGS_FILE", "config.json")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "scheduling_test_db"),
}

AUTO_INIT_DB = False
AUTO_SEED_DB = False
