import os

import sentry_sdk
from dotenv import load_dotenv
from flask import Flask
from sentry_sdk.integrations.flask import FlaskIntegration

from .constants import ENV_DEVELOPMENT, ENV_PRODUCTION, ENV_STAGING, ENV_TESTING

# Import extensions from the extensions module
from .extensions import cors
from .integrations.attendance_script.client import AttendanceScriptClient
from .translation.resolver import TranslationResolver
from .translation.service import TranslationService


def create_app(config_class=None):
    """
    Application factory function to create and configure the Flask app.
    """
    app = Flask(__name__)

    # Load environment variables early
    load_dotenv()

    # --- Configuration ---
    if config_class is None:
        # Determine configuration based on FLASK_ENV environment variable
        env = os.getenv("FLASK_ENV", ENV_DEVELOPMENT)
        if env == ENV_PRODUCTION:
            from .config import ProductionConfig

            config_class = ProductionConfig
        elif env == ENV_STAGING:
            from .config import StagingConfig

            config_class = StagingConfig
        elif env == ENV_TESTING:
            from .config import TestingConfig

            config_class = TestingConfig
        else:  # Default to development
            from .config import DevelopmentConfig

            config_class = DevelopmentConfig

    app.config.from_object(config_class)

    # --- Sentry Initialization ---
    sentry_dsn = app.config.get("SENTRY_DSN")
    if sentry_dsn:
        sentry_sdk.init(
            dsn=sentry_dsn,
            integrations=[
                FlaskIntegration(),
            ],
            traces_sample_rate=app.config.get("SENTRY_TRACES_SAMPLE_RATE", 1.0),
            profiles_sample_rate=app.config.get("SENTRY_PROFILES_SAMPLE_RATE", 1.0),
            environment=app.config.get("FLASK_ENV"),
            release=app.config.get("APP_VERSION", None),
        )
        print("Sentry initialized for environment: ", f"{app.config.get('FLASK_ENV')}")
    else:
        print("SENTRY_DSN not found. Sentry will not be initialized.")

    # --- Attendance Script Integration ---
    app.attendance_client = AttendanceScriptClient(app.config)
    if not app.attendance_client.is_configured:
        print("WARNING: ATTENDANCE_SCRIPT_ID not found. Attendance lookups will fail.")

    # --- Translation ---
    app.translation_service = TranslationService(
        app.config.get("TRANSLATION_ENDPOINTS", []),
        timeout=app.config.get("TRANSLATION_TIMEOUT_SECONDS"),
    )
    app.translation_resolver = TranslationResolver(
        app.translation_service,
        cache_size=app.config.get("TRANSLATION_CACHE_SIZE", 1024),
        retry_after=app.config.get("TRANSLATION_RETRY_AFTER_SECONDS", 60),
    )

    # --- CORS Configuration ---
    # For production, use the configured origins, credentials, and headers
    if app.config["FLASK_ENV"] == ENV_PRODUCTION or app.config["FLASK_ENV"] == ENV_STAGING:
        configured_origins = app.config.get("CORS_ORIGINS", [])
        configured_supports_credentials = app.config.get("CORS_SUPPORTS_CREDENTIALS", False)
        configured_allow_headers = app.config.get("CORS_ALLOW_HEADERS", ["Content-Type"])
        cors.init_app(
            app,
            resources={
                r"/*": {
                    "origins": configured_origins,
                    "supports_credentials": configured_supports_credentials,
                    "allow_headers": configured_allow_headers,
                }
            },
        )
    else:  # For development, use simpler CORS or specific dev settings
        cors.init_app(
            app,
            resources={
                r"/*": {
                    "origins": "*",  # Allow all for development
                    "supports_credentials": True,
                    "allow_headers": ["Content-Type"],
                }
            },
        )

    # --- Register Blueprints ---
    from .routes.attendance import bp as attendance_bp
    from .routes.main import bp as main_bp
    from .routes.preferences import bp as preferences_bp
    from .routes.proxy import bp as proxy_bp
    from .routes.translate import bp as translate_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(proxy_bp)
    app.register_blueprint(translate_bp)
    app.register_blueprint(attendance_bp)
    app.register_blueprint(preferences_bp)

    return app
