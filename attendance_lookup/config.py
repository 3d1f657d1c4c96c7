import os

from attendance_lookup.constants import (
    DEFAULT_SCRIPT_ACTION,
    DEFAULT_SCRIPT_BASE_URL,
    DEFAULT_TRANSLATION_ENDPOINTS,
)


def _split_env_list(name: str, default: list[str]) -> list[str]:
    value = os.getenv(name)
    if not value:
        return list(default)
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    """Base configuration."""

    FLASK_ENV = os.getenv("FLASK_ENV", "development")
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")
    SENTRY_DSN = os.getenv("SENTRY_DSN")
    SENTRY_TRACES_SAMPLE_RATE = float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "1.0"))
    SENTRY_PROFILES_SAMPLE_RATE = float(os.getenv("SENTRY_PROFILES_SAMPLE_RATE", "1.0"))
    APP_VERSION = os.getenv("HEROKU_SLUG_COMMIT", "local")

    # Spreadsheet script configuration
    ATTENDANCE_SCRIPT_BASE_URL = os.getenv("ATTENDANCE_SCRIPT_BASE_URL", DEFAULT_SCRIPT_BASE_URL)
    ATTENDANCE_SCRIPT_ID = os.getenv("ATTENDANCE_SCRIPT_ID")
    ATTENDANCE_SCRIPT_ACTION = os.getenv("ATTENDANCE_SCRIPT_ACTION", DEFAULT_SCRIPT_ACTION)
    UPSTREAM_TIMEOUT_SECONDS = float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "30"))

    # Translation configuration
    TRANSLATION_ENDPOINTS = _split_env_list("TRANSLATION_ENDPOINTS", DEFAULT_TRANSLATION_ENDPOINTS)
    TRANSLATION_TIMEOUT_SECONDS = float(os.getenv("TRANSLATION_TIMEOUT_SECONDS", "10"))
    TRANSLATION_CACHE_SIZE = int(os.getenv("TRANSLATION_CACHE_SIZE", 1024))
    TRANSLATION_RETRY_AFTER_SECONDS = float(os.getenv("TRANSLATION_RETRY_AFTER_SECONDS", "60"))


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True


class TestingConfig(Config):
    """Testing configuration."""

    TESTING = True
    DEBUG = True
    FLASK_ENV = "testing"
    ATTENDANCE_SCRIPT_ID = "test-script-id"
    SENTRY_DSN = None


class StagingConfig(Config):
    """Staging configuration."""

    DEBUG = True
    SENTRY_TRACES_SAMPLE_RATE = float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.5"))
    SENTRY_PROFILES_SAMPLE_RATE = float(os.getenv("SENTRY_PROFILES_SAMPLE_RATE", "0.25"))
    CORS_ORIGINS = os.getenv(
        "CORS_ORIGINS",
        "",
    ).split(",")
    CORS_SUPPORTS_CREDENTIALS = True
    CORS_ALLOW_HEADERS = ["Content-Type"]


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    SENTRY_TRACES_SAMPLE_RATE = float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.1"))  # Lower sample rate for prod
    SENTRY_PROFILES_SAMPLE_RATE = float(os.getenv("SENTRY_PROFILES_SAMPLE_RATE", "0.05"))
    CORS_ORIGINS = os.getenv(
        "CORS_ORIGINS",
        "",
    ).split(",")
    CORS_SUPPORTS_CREDENTIALS = True
    CORS_ALLOW_HEADERS = ["Content-Type"]
