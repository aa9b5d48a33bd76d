"""Configuration settings - Configuration Layer (Environment Separated)"""
import json
import os
from typing import NamedTuple, Optional
from dotenv import load_dotenv
from booktoggle.exceptions.exceptions import ConfigurationError

# web/ directory: holds app.py, the seed dataset and the logs folder
WEB_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

DEFAULT_DB_NAME = "hello"
DEFAULT_COLLECTION = "books"
DEFAULT_PORT = "3000"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT_RETRY_ATTEMPTS = "5"
DEFAULT_SEED_FILE = os.path.join(WEB_DIR, "test.books.json")
DEFAULT_LOCAL_CONFIG = "local_config.json"

def safe_int_env(key: str, default: str) -> int:
    """Safely convert environment variable to int"""
    try:
        return int(os.getenv(key, default))
    except ValueError:
        return int(default)

class ToggleSettings(NamedTuple):
    mongo_uri: str
    db_name: str
    collection_name: str
    host: str
    port: int
    port_retry_attempts: int
    seed_file: str

def _mongo_uri_from_local_config(config_path: str) -> Optional[str]:
    """Fallback to local config file: {"MONGO_CONFIG": {"url": ...}}"""
    try:
        with open(config_path, 'r') as config_file:
            config_data = json.load(config_file)
    except FileNotFoundError:
        return None
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Could not read {config_path}: {e}") from e
    return config_data.get("MONGO_CONFIG", {}).get("url")

def load_settings(env_file: Optional[str] = None, local_config: str = DEFAULT_LOCAL_CONFIG) -> ToggleSettings:
    """Read process configuration once at startup.

    Raises ConfigurationError when no MongoDB connection string is available.
    """
    load_dotenv(env_file)

    mongo_uri = os.getenv("MONGO_URI") or _mongo_uri_from_local_config(local_config)
    if not mongo_uri:
        raise ConfigurationError(
            "MONGO_URI is not set. Please create a .env file from .env.example "
            "or set the MONGO_URI environment variable."
        )

    return ToggleSettings(
        mongo_uri=mongo_uri,
        db_name=os.getenv("DB_NAME", DEFAULT_DB_NAME),
        collection_name=os.getenv("COLLECTION", DEFAULT_COLLECTION),
        host=os.getenv("HOST", DEFAULT_HOST),
        port=safe_int_env("PORT", DEFAULT_PORT),
        port_retry_attempts=max(1, safe_int_env("PORT_RETRY_ATTEMPTS", DEFAULT_PORT_RETRY_ATTEMPTS)),
        seed_file=os.getenv("SEED_FILE", DEFAULT_SEED_FILE),
    )
