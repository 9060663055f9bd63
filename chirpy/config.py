"""
Environment-aware configuration.
Values come from the process environment, with .env loaded first if present.
The database URL is read by DBStorage (models/db_storage.py).
"""
import os
from dotenv import load_dotenv
from datetime import timedelta

load_dotenv()  # Read .env if present


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")  # Set a strong key in production
    DEBUG = False
    TESTING = False
    # CORS: in dev we usually allow '*', in prod supply a comma-separated list in env
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
    APP_ENV = os.getenv("APP_ENV", "dev")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    # "dev" unlocks POST /admin/reset
    PLATFORM = os.getenv("PLATFORM", "")

    JWT_SECRET = os.getenv("JWT_SECRET", "dev-secret-change-me")
    JWT_TOKEN_EXPIRES = timedelta(seconds=int(os.getenv("JWT_TOKEN_EXPIRES_SECONDS", "3600")))
    REFRESH_TOKEN_EXPIRES = timedelta(days=int(os.getenv("REFRESH_TOKEN_EXPIRES_DAYS", "60")))
    # Shared key sent by the Polka payment webhook
    POLKA_KEY = os.getenv("POLKA_KEY", "")

    CHIRP_MAX_LENGTH = 140
    FILESERVER_ROOT = os.getenv("FILESERVER_ROOT", ".")


class DevelopmentConfig(BaseConfig):
    DEBUG = True


class ProductionConfig(BaseConfig):
    DEBUG = False


class TestingConfig(BaseConfig):
    TESTING = True
    PLATFORM = "dev"
    JWT_SECRET = "test-secret-with-at-least-32-bytes!"
    POLKA_KEY = "f271c81ff7084ee5b99a5091b42d486e"
    LOG_LEVEL = "WARNING"


def get_config(name: str | None):
    """
    Select config class.
    - If name is provided, choose by name.
    - Else choose based on APP_ENV (dev/prod/test).
    """
    if name:
        name = name.lower()
    env = (name or os.getenv("APP_ENV", "dev")).lower()
    if env in ["prod", "production"]:
        return ProductionConfig
    if env in ["test", "testing"]:
        return TestingConfig
    return DevelopmentConfig
