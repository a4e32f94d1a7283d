"""Environment-backed configuration loading."""

import logging
import os
from typing import Mapping, Optional

from dotenv import load_dotenv

from ..domain.models.config import GuardianConfig

logger = logging.getLogger(__name__)


def _optional(value: Optional[str]) -> Optional[str]:
    """Treat empty strings as unset."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def config_from_mapping(env: Mapping[str, str]) -> GuardianConfig:
    """Build the configuration from an environment-like mapping.

    Args:
        env: Mapping of environment variable names to values

    Returns:
        Validated configuration

    Raises:
        pydantic.ValidationError: If a value is out of range or malformed
    """
    values = {
        "min_confidence_threshold": env.get("MIN_CONFIDENCE_THRESHOLD"),
        "google_fact_check_api_key": _optional(env.get("GOOGLE_FACT_CHECK_API_KEY")),
        "request_interval": env.get("FACT_CHECK_REQUEST_INTERVAL"),
        "request_timeout": env.get("FACT_CHECK_TIMEOUT"),
        "language": env.get("GUARDIAN_LANGUAGE"),
        "fact_check_language_code": _optional(env.get("FACT_CHECK_LANGUAGE_CODE")),
        "report_sink_url": _optional(env.get("REPORT_SINK_URL")),
        "log_level": env.get("LOG_LEVEL"),
    }
    return GuardianConfig(**{key: value for key, value in values.items() if value is not None})


def load_config() -> GuardianConfig:
    """Load the configuration from the process environment and a .env file."""
    load_dotenv()
    config = config_from_mapping(os.environ)

    if config.remote_fact_check_enabled:
        logger.info("✅ Google Fact Check API key loaded")
    else:
        logger.info("🎭 GOOGLE_FACT_CHECK_API_KEY not set - using heuristic fact checking only")

    return config
