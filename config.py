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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./accounts.db")
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))
    STORE_TIMEOUT_SECONDS = float(data.get("STORE_TIMEOUT_SECONDS", 5))
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 5000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
    SESSION_COOKIE_NAME = data.get("SESSION_COOKIE_NAME", "sid")
    SESSION_COOKIE_SECURE = bool(data.get("SESSION_COOKIE_SECURE", True))
    # "none" for a cross-site frontend, "lax" for local development
    SESSION_COOKIE_SAMESITE = data.get("SESSION_COOKIE_SAMESITE", "none")
    SESSION_TTL_SECONDS = int(data.get("SESSION_TTL_SECONDS", 86400))
    ADMIN_EMAILS = [e.strip().lower() for e in data.get("ADMIN_EMAILS", [])]
    ALLOW_PASSWORD_RESET = bool(data.get("ALLOW_PASSWORD_RESET", True))
    # Off: any authenticated session may list and manage users
    REQUIRE_ADMIN_ROLE = bool(data.get("REQUIRE_ADMIN_ROLE", False))
