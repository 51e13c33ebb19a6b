import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./invoicing.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")

    # Invoice issuance
    INVOICE_LOCK_TIMEOUT_SECONDS = float(data.get("INVOICE_LOCK_TIMEOUT_SECONDS", 5))  # counter row wait

    # Invoice listing
    LIST_DEFAULT_LIMIT = int(data.get("LIST_DEFAULT_LIMIT", 10))
    LIST_MAX_LIMIT = int(data.get("LIST_MAX_LIMIT", 100))
