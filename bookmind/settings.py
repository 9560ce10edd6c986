# bookmind/settings.py — configuration and environment setup

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# .env values must be visible before the dataclass defaults are read
load_dotenv()


def _flag(name: str, default: str = "1") -> bool:
    return os.getenv(name, default).strip().lower() not in ("0", "false", "no", "off", "")


@dataclass
class Settings:
    """Application configuration values loaded from environment variables."""
    data_dir: str = os.getenv("DATA_DIR", ".data")
    backend: str = os.getenv("BOOKMARK_BACKEND", "sqlite")
    raindrop_token: str = os.getenv("RAINDROP_TOKEN", "")
    api_key: str = os.getenv("PERPLEXITY_API_KEY", "")
    model: str = os.getenv("PERPLEXITY_MODEL", "sonar")
    base_url: str = os.getenv("PERPLEXITY_BASE_URL", "https://api.perplexity.ai")
    ai_enabled: bool = _flag("AI_ENABLED")
    context_limit: int = int(os.getenv("CONTEXT_LIMIT", "50"))
    timeout: float = float(os.getenv("COMPLETION_TIMEOUT", "30"))

    @property
    def ai_ready(self) -> bool:
        return self.ai_enabled and bool(self.api_key.strip())


settings = Settings()
