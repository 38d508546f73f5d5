"""
Configuration management with environment variables.
"""

import os
import sys
from typing import Optional
from dotenv import load_dotenv
from nuget_diagnostics.utils.logger import get_logger
from nuget_diagnostics.constants import LOCAL_CONFIG_FILENAME

# Load .env file early (for local/dev)
load_dotenv()

logger = get_logger(__name__, "Configuration")


class Config:
    """Application configuration loaded from environment variables."""

    # General
    IS_LOCAL = os.getenv("IS_LOCAL", "false").lower() == "true"

    # Probe
    PROBE_TIMEOUT: Optional[str] = os.getenv("PROBE_TIMEOUT", "10")
    NUGET_CONFIG_FILE: Optional[str] = os.getenv("NUGET_CONFIG_FILE", LOCAL_CONFIG_FILENAME)

    # Application Settings
    API_HOST: Optional[str] = os.getenv("API_HOST", "127.0.0.1")
    API_PORT: Optional[str] = os.getenv("API_PORT", "8092")
    LOG_LEVEL: Optional[str] = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: Optional[str] = os.getenv("LOG_FILE")

    # SSL / Certificates
    SSL_CERT_FILE: Optional[str] = os.getenv("SSL_CERT_FILE")
    REQUESTS_CA_BUNDLE: Optional[str] = os.getenv("REQUESTS_CA_BUNDLE")

    @classmethod
    def validate(cls) -> None:
        """Validate environment variables and convert types."""
        try:
            cls.PROBE_TIMEOUT = float(cls.PROBE_TIMEOUT)
            cls.API_PORT = int(cls.API_PORT)
        except (TypeError, ValueError) as e:
            logger.critical(f"Invalid type in environment variables: {e}")
            raise SystemExit(1)

        if cls.PROBE_TIMEOUT <= 0:
            logger.critical(f"PROBE_TIMEOUT must be positive, got {cls.PROBE_TIMEOUT}")
            raise SystemExit(1)

        cls.LOG_LEVEL = cls.LOG_LEVEL.upper()
        if cls.LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            logger.critical(f"Unknown LOG_LEVEL: {cls.LOG_LEVEL}")
            raise SystemExit(1)

        # Optional vars: note when missing
        if not (cls.REQUESTS_CA_BUNDLE or cls.SSL_CERT_FILE):
            logger.debug("No CA bundle override set, using certifi bundle")

    def get_ca_bundle(self) -> Optional[str]:
        """Return the CA bundle override, if any."""
        return self.REQUESTS_CA_BUNDLE or self.SSL_CERT_FILE


config = Config()

try:
    config.validate()
    logger.debug("Configuration successfully loaded and validated")
except SystemExit:
    sys.exit(1)
except Exception:
    logger.exception("Unexpected error during configuration validation")
    sys.exit(1)
