"""Configuration management and environment variable loading."""

import os
from dotenv import load_dotenv

# Load environment variables from .env file (don't override existing env vars)
load_dotenv(override=False)


class Config:
    """Application configuration."""

    # Endpoint that fetches transcripts server-side
    TRANSCRIPT_API_URL: str = os.getenv("TRANSCRIPT_API_URL", "http://localhost:3000/api/transcript")
    # Seconds; matches the httpx default so the transport decides when to give up
    REQUEST_TIMEOUT: float = float(os.getenv("REQUEST_TIMEOUT", "5.0"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> None:
        """Validate that required configuration is present."""
        if not cls.TRANSCRIPT_API_URL:
            raise ValueError(
                "TRANSCRIPT_API_URL is required. Please set it in your .env file or environment variables."
            )
        if not cls.TRANSCRIPT_API_URL.startswith(("http://", "https://")):
            raise ValueError(
                f"TRANSCRIPT_API_URL must be an absolute http(s) URL, got: {cls.TRANSCRIPT_API_URL}"
            )
        if cls.REQUEST_TIMEOUT <= 0:
            raise ValueError(f"REQUEST_TIMEOUT must be positive, got: {cls.REQUEST_TIMEOUT}")
