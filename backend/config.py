import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv
load_dotenv()


SERVICE_NAME = "flexyn-workout-backend"
TEMPERATURE = 0.8

DEFAULT_MODEL = "gpt-4.1-mini"
DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_PORT = 5001


def _env_key() -> Optional[str]:
    key = (os.getenv("OPENAI_API_KEY") or "").strip()
    return key or None


@dataclass
class RelayConfig:
    api_key: Optional[str] = field(default_factory=_env_key)
    model: str = field(default_factory=lambda: os.getenv("OPENAI_MODEL", DEFAULT_MODEL))
    base_url: str = field(default_factory=lambda: os.getenv("OPENAI_BASE_URL", DEFAULT_BASE_URL))
    temperature: float = TEMPERATURE

    @property
    def completions_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/chat/completions"


HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", DEFAULT_PORT))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
