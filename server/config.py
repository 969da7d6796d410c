# server/config.py

import os
import logging
from functools import lru_cache
from dotenv import load_dotenv
from pydantic import BaseModel


load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_SECRET = "dev_secret_change_me"


class Settings(BaseModel):
    """
    Process-wide configuration, read once at startup.
    Handed to the app factory and reachable from handlers via app.state.
    """
    jwt_secret: str = DEFAULT_SECRET
    jwt_algorithm: str = "HS256"
    token_expire_minutes: int = 60
    database_url: str = "sqlite:///./data/app.db"
    media_root: str = "data/media"
    media_url: str = "/media"
    allowed_origin: str = "http://localhost:5173"
    environment: str = "development"
    mask_login_failures: bool = False
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@lru_cache
def get_settings() -> Settings:
    return Settings(
        jwt_secret=os.getenv("JWT_SECRET", DEFAULT_SECRET),
        jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
        token_expire_minutes=int(os.getenv("TOKEN_EXPIRE_MINUTES", "60")),
        database_url=os.getenv("DATABASE_URL", "sqlite:///./data/app.db"),
        media_root=os.getenv("MEDIA_ROOT", "data/media"),
        media_url=os.getenv("MEDIA_URL", "/media"),
        allowed_origin=os.getenv("ALLOWED_ORIGIN", "http://localhost:5173"),
        environment=os.getenv("ENVIRONMENT", "development"),
        mask_login_failures=_env_bool("MASK_LOGIN_FAILURES", False),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )


def configure_logging(settings: Settings):
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if settings.is_production and settings.jwt_secret == DEFAULT_SECRET:
        logger.warning("JWT_SECRET is not set; running production with the development secret")
