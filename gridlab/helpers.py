# helpers.py
import logging
import os

from dotenv import load_dotenv

load_dotenv()


def _env_int(name, default):
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logging.getLogger(__name__).warning("%s=%r is not a number, using %s", name, raw, default)
        return default


def load_config():
    """Settings read from the environment (and a .env file, if present)."""
    return {
        "SECRET_KEY": os.environ.get("GRIDLAB_SECRET") or "dev-secret-key",
        "RATE_LIMIT": _env_int("GRIDLAB_RATE_LIMIT", 60),
        "RATE_WINDOW": _env_int("GRIDLAB_RATE_WINDOW", 60),
        "MAX_INPUT": _env_int("GRIDLAB_MAX_INPUT", 10000),
        "LOG_LEVEL": (os.environ.get("GRIDLAB_LOG_LEVEL") or "INFO").upper(),
    }


def configure_logging(app):
    level = getattr(logging, app.config.get("LOG_LEVEL", "INFO"), logging.INFO)
    app.logger.setLevel(level)
    logging.getLogger("gridlab").setLevel(level)
    logging.getLogger("werkzeug").setLevel(level)
