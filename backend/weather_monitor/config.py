"""
Configuration
=============

Settings come from environment variables. A `.env` file next to where
the server is started is loaded first, so local overrides don't need
to be exported by hand.
"""

import os

from dotenv import load_dotenv


# Load environment variables from .env file
load_dotenv()


def _csv_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    """
    Application configuration loaded from environment variables.

    Environment Variables:
        HOST: Address to bind to (default: 0.0.0.0)
        PORT: Port to listen on (default: 8000)
        LOG_LEVEL: DEBUG, INFO, WARNING or ERROR (default: INFO)
        CORS_ORIGINS: Comma-separated allowed origins (default: *)
        SUMMARY_INTERVAL: Seconds between daily-summary log lines,
            0 turns it off (default: 0)
    """

    HOST = os.getenv("HOST", "0.0.0.0")

    PORT = int(os.getenv("PORT", "8000"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    CORS_ORIGINS = _csv_list(os.getenv("CORS_ORIGINS", "*"))

    SUMMARY_INTERVAL = int(os.getenv("SUMMARY_INTERVAL", "0"))
