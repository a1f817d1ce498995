"""Configuration management for the blog server."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent.parent

# Load environment variables
load_dotenv()


class Config:
    """Base configuration for the blog server."""

    # Application
    APP_NAME = os.environ.get("APP_NAME", "Blog")
    TESTING = False

    # Process binding
    HOST = os.environ.get("BLOG_HOST", "127.0.0.1")
    PORT = int(os.environ.get("BLOG_PORT", "8080"))

    # Content locations
    TEMPLATE_ROOT = os.environ.get("BLOG_TEMPLATE_ROOT", str(PACKAGE_DIR / "templates"))
    STATIC_ROOT = os.environ.get("BLOG_STATIC_ROOT", str(PACKAGE_DIR / "static"))
    POSTS_PATH = os.environ.get("BLOG_POSTS_PATH", str(PACKAGE_DIR / "data" / "posts.json"))

    # Logging; an empty path disables the rotating file handler
    LOG_PATH = os.environ.get("BLOG_LOG_PATH", "blog.log")
    LOG_LEVEL = logging.DEBUG

    @classmethod
    def validate(cls) -> None:
        """Validate required configuration."""
        if not 1 <= cls.PORT <= 65535:
            raise ValueError(f"BLOG_PORT must be between 1 and 65535: {cls.PORT}")

        for name in ("TEMPLATE_ROOT", "STATIC_ROOT"):
            value = getattr(cls, name)
            if not value:
                raise ValueError(f"Missing required configuration: {name}")
            if not os.path.isdir(value):
                raise ValueError(f"{name} is not a directory: {value}")


class DevelopmentConfig(Config):
    """Development configuration."""


class ProductionConfig(Config):
    """Production configuration."""

    LOG_LEVEL = logging.INFO


class TestingConfig(Config):
    """Configuration used by the test-suite."""

    TESTING = True
    LOG_PATH = ""
    LOG_LEVEL = logging.INFO


# Select configuration based on environment
config = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig,
}
