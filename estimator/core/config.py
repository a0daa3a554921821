"""Application configuration utilities."""

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


def load_environment(env_file: Optional[str] = None) -> None:
    """Loads environment variables from a `.env` file."""
    if env_file:
        load_dotenv(dotenv_path=env_file, override=True)
        return
    default_path = Path(".env")
    if default_path.exists():
        load_dotenv(dotenv_path=default_path, override=True)
