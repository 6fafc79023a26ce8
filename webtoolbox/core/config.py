import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


load_dotenv()

SUPPORTED_LOCALES = ("nl", "en")


@dataclass(frozen=True)
class Config:
    """Toolbox configuration loaded from environment variables.

    Values are read once at import time, after the project's ``.env`` file
    has been loaded.
    """

    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")

    LOCALE: str = os.getenv("TOOLBOX_LOCALE", "nl")
    SESSION_USER_KEY: str = os.getenv("SESSION_USER_KEY", "user_id")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "")

    PUBLIC_DIR: str = os.getenv("PUBLIC_DIR", "public")
    TEMPLATES_DIR: str = os.getenv(
        "TEMPLATES_DIR", str(Path(__file__).resolve().parent.parent / "templates")
    )

    @staticmethod
    def public_path(filename: str) -> Path:
        return Path(os.getenv("PUBLIC_DIR", Config.PUBLIC_DIR)) / filename

    @classmethod
    def validate(cls) -> None:
        if cls.LOCALE not in SUPPORTED_LOCALES:
            raise ValueError(f"TOOLBOX_LOCALE must be one of {', '.join(SUPPORTED_LOCALES)}, got {cls.LOCALE!r}")
        if cls.ENVIRONMENT == "production" and not cls.SECRET_KEY:
            raise ValueError("SECRET_KEY environment variable is required in production")
