"""
Configuration loaded from environment variables
Optional .env file in the working directory or project root
"""

from pydantic_settings import BaseSettings
from functools import lru_cache
from pathlib import Path


def _find_env_file() -> str:
    """Find .env file in current or project root directory"""
    if Path(".env").exists():
        return ".env"
    # Running from backend/
    parent_env = Path(__file__).parent.parent.parent / ".env"
    if parent_env.exists():
        return str(parent_env)
    return ".env"


class Settings(BaseSettings):
    """Service settings from environment"""

    # Word list (empty = bundled default)
    WORDLIST_PATH: str = ""

    # Generation defaults for requests that omit a field
    DEFAULT_WORD_COUNT: int = 7
    DEFAULT_DIGIT_COUNT: int = 3
    DEFAULT_SEPARATOR: str = " "
    EXCLUDE_LOOK_ALIKE: bool = False

    # Rate limiting (token bucket per client IP)
    RATE_LIMIT_PER_MINUTE: int = 60
    RATE_LIMIT_BURST: int = 10

    # Application
    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 8000
    FRONTEND_URL: str = "https://localhost"
    TRUST_PROXY_HEADERS: bool = True
    TRUSTED_PROXY_CIDRS_RAW: str = "127.0.0.1/32,::1/128,10.0.0.0/8,172.16.0.0/12,192.168.0.0/16"
    LOG_LEVEL: str = "INFO"

    @property
    def trusted_proxy_cidrs(self) -> list[str]:
        raw = self.TRUSTED_PROXY_CIDRS_RAW
        if not raw:
            return []
        return [item.strip() for item in str(raw).split(",") if item.strip()]

    class Config:
        env_file = _find_env_file()
        case_sensitive = True


ALLOWED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_generator_settings(active_settings: Settings) -> None:
    """Validate settings the generator and service depend on."""
    errors = []

    for field_name in ("DEFAULT_WORD_COUNT", "DEFAULT_DIGIT_COUNT", "RATE_LIMIT_PER_MINUTE", "RATE_LIMIT_BURST"):
        if getattr(active_settings, field_name) < 1:
            errors.append(f"{field_name} must be >= 1")

    if active_settings.LOG_LEVEL.upper() not in ALLOWED_LOG_LEVELS:
        allowed = ", ".join(ALLOWED_LOG_LEVELS)
        errors.append(f"LOG_LEVEL must be one of: {allowed}")

    if active_settings.WORDLIST_PATH and not Path(active_settings.WORDLIST_PATH).is_file():
        errors.append(f"WORDLIST_PATH {active_settings.WORDLIST_PATH} does not exist")

    if errors:
        raise ValueError("Invalid generator configuration:\n- " + "\n- ".join(errors))


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance"""
    return Settings()


settings = get_settings()
