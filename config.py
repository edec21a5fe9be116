import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file)
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./property.db")
    STORE_BACKEND = data.get("STORE_BACKEND", "sql")  # "sql" or "memory"
    SEED_DEMO_DATA = bool(data.get("SEED_DEMO_DATA", True))
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_EXPIRES_MINUTES = int(data.get("JWT_EXPIRES_MINUTES", 60))
    PAYMENT_DELAY_SECONDS = float(data.get("PAYMENT_DELAY_SECONDS", 1.5))
    PAYMENT_SUCCESS_RATE = float(data.get("PAYMENT_SUCCESS_RATE", 0.8))
    PAYMENT_RANDOM_SEED = data.get("PAYMENT_RANDOM_SEED")
