# gateway/config.py

import os
import logging
from pathlib import Path
from typing import Dict, List, Optional
from urllib.parse import quote_plus

from dotenv import dotenv_values, load_dotenv
from pydantic_settings import BaseSettings

# Relative paths in settings resolve against the project root
PROJECT_ROOT = Path(__file__).parent.parent

# Load .env from the project root
env_path = PROJECT_ROOT / ".env"
load_dotenv(dotenv_path=env_path)

logger = logging.getLogger(__name__)

# Keys of the connection properties file, mapped to settings fields
DB_PROPERTY_KEYS = {
    "db.prefix": "db_prefix",
    "db.host": "db_host",
    "db.name": "db_name",
    "db.user": "db_user",
    "db.password": "db_password",
    "db.params": "db_params",
}


class Settings(BaseSettings):
    """Gateway settings"""

    # === Server ===
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("PORT", "3000"))
    environment: str = os.getenv("ENVIRONMENT", "development")

    # === Database connection ===
    db_properties_file: str = os.getenv(
        "DB_PROPERTIES_FILE", "dbconnection.properties"
    )
    db_prefix: str = os.getenv("DB_PREFIX", "")
    db_host: str = os.getenv("DB_HOST", "")
    db_name: str = os.getenv("DB_NAME", "")
    db_user: str = os.getenv("DB_USER", "")
    db_password: str = os.getenv("DB_PASSWORD", "")
    db_params: str = os.getenv("DB_PARAMS", "")
    mongodb_server_api: Optional[str] = "1"
    mongodb_timeout_ms: int = int(os.getenv("MONGODB_TIMEOUT_MS", "5000"))

    # === CORS ===
    cors_origin: str = os.getenv("CORS_ORIGIN", "https://patiencevelma.github.io")
    cors_allow_methods: List[str] = ["GET", "POST", "PUT", "DELETE"]
    cors_allow_headers: List[str] = ["Content-Type"]

    # === Static files ===
    images_dir: str = os.getenv("IMAGES_DIR", "images")
    static_dir: Optional[str] = os.getenv("STATIC_DIR") or None

    # === Logging ===
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    @property
    def mongodb_uri(self) -> str:
        """Assemble the connection string from the six discrete fields"""
        user = quote_plus(self.db_user)
        password = quote_plus(self.db_password)
        return f"{self.db_prefix}{user}:{password}{self.db_host}{self.db_params}"

    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    class Config:
        env_file = str(env_path)
        case_sensitive = False
        extra = "ignore"


def resolve_path(path: str) -> Path:
    """Resolve a configured path against the project root"""
    return (PROJECT_ROOT / path).resolve()


def read_db_properties(path: str) -> Dict[str, str]:
    """Read `db.*` keys from a properties file into settings field names.

    Missing files and unknown keys are ignored; empty values are kept out so
    they don't shadow environment fallbacks.
    """
    properties_path = resolve_path(path)
    if not properties_path.is_file():
        logger.warning(f"Connection properties file not found: {properties_path}")
        return {}

    values = dotenv_values(properties_path)
    return {
        field: values[key].strip()
        for key, field in DB_PROPERTY_KEYS.items()
        if values.get(key)
    }


def load_settings(**overrides) -> Settings:
    """Build settings, letting the properties file win over the environment"""
    base = Settings(**overrides)
    properties = read_db_properties(base.db_properties_file)
    if not properties:
        return base

    logger.info(f"Loaded connection properties from {base.db_properties_file}")
    return base.model_copy(update=properties)


settings = load_settings()
