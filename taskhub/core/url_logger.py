"""Short link access logging using Loguru's built-in async features."""

import os
from datetime import datetime

from loguru import logger

from taskhub.core.config import Settings

url_access_logger = logger.bind(event_type="url_access")

_sink_ids = []


def setup_url_logging(settings: Settings):
    """Add the dedicated sinks for short link access records.

    Records are bound with ``event_type="url_access"`` so the main
    application sinks filter them out and only these sinks receive them.
    """
    for sink_id in _sink_ids:
        try:
            logger.remove(sink_id)
        except ValueError:
            pass
    _sink_ids.clear()

    if not (settings.URL_ACCESS_LOGGING_ENABLED and settings.LOG_TO_FILE):
        return url_access_logger

    os.makedirs(settings.LOG_DIR, exist_ok=True)

    _sink_ids.append(logger.add(
        os.path.join(settings.LOG_DIR, "url_access.log"),
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | IP:{extra[ip]} | Code:{extra[short_code]} | {message}",
        rotation=settings.LOG_ROTATION,
        retention=settings.LOG_RETENTION,
        enqueue=True,
        level="INFO",
        backtrace=False,
        diagnose=False,
        filter=lambda record: record["extra"].get("event_type") == "url_access"
    ))

    _sink_ids.append(logger.add(
        os.path.join(settings.LOG_DIR, "url_access.json"),
        serialize=True,
        enqueue=True,
        level="INFO",
        filter=lambda record: record["extra"].get("event_type") == "url_access"
    ))

    return url_access_logger


def log_url_access(short_code: str, ip_address: str, user_agent: str = ""):
    """
    Log a short link access event.

    Args:
        short_code: The short code that was requested
        ip_address: The client's IP address
        user_agent: Optional user agent string
    """
    url_access_logger.bind(
        ip=ip_address,
        short_code=short_code,
        user_agent=user_agent,
        timestamp=datetime.utcnow().isoformat()
    ).info(f"Short link accessed: {short_code}")
