"""Environment configuration."""
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel


DEFAULT_MODEL = "claude-haiku-4-5"


class Settings(BaseModel):
    """Runtime settings read from the environment (and a .env file)."""
    api_key: str | None = None
    model: str = DEFAULT_MODEL
    max_tokens: int = 2048
    timeout: float = 60.0
    data_dir: Path = Path("data")


def load_settings() -> Settings:
    """Load settings, letting a local .env fill in unset variables."""
    load_dotenv()
    return Settings(
        api_key=os.getenv("ANTHROPIC_API_KEY") or None,
        model=os.getenv("OPINION_CARDS_MODEL", DEFAULT_MODEL),
        max_tokens=int(os.getenv("OPINION_CARDS_MAX_TOKENS", "2048")),
        timeout=float(os.getenv("OPINION_CARDS_TIMEOUT", "60")),
        data_dir=Path(os.getenv("OPINION_CARDS_DATA_DIR", "data")),
    )
