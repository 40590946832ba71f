from pydantic import BaseModel, ConfigDict
import os
from typing import Optional
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db: str = "auth"
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    jwt_expires_minutes: int = 60
    reset_token_expires_minutes: int = 120
    frontend_base_url: str = "http://localhost:3000"
    cors_origins: tuple[str, ...] = ("*",)
    host: str = "0.0.0.0"
    port: int = 5000
    smtp_host: str | None = "smtp.mailtrap.io"
    smtp_port: int = 2525
    smtp_user: str | None = None
    smtp_pass: str | None = None
    smtp_from: str = "Auth System <auth@example.com>"
    smtp_starttls: bool = True
    smtp_timeout: float = 10.0
    log_level: str = "INFO"


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


def load_settings() -> Settings:
    jwt_secret_key = os.getenv("JWT_SECRET_KEY", "")
    if not jwt_secret_key:
        raise RuntimeError("JWT_SECRET_KEY is not set")
    return Settings(
        mongo_uri=os.getenv("MONGO_URI", "mongodb://localhost:27017"),
        mongo_db=os.getenv("MONGO_DB", "auth"),
        jwt_secret_key=jwt_secret_key,
        jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
        jwt_expires_minutes=int(os.getenv("JWT_EXPIRES_MINUTES", "60")),
        reset_token_expires_minutes=int(os.getenv("RESET_TOKEN_EXPIRES_MINUTES", "120")),
        frontend_base_url=os.getenv("FRONTEND_BASE_URL", "http://localhost:3000").rstrip("/"),
        cors_origins=_split_csv(os.getenv("CORS_ORIGINS", "*")),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "5000")),
        smtp_host=os.getenv("SMTP_HOST", "smtp.mailtrap.io"),
        smtp_port=int(os.getenv("SMTP_PORT", "2525")),
        smtp_user=os.getenv("SMTP_USER"),
        smtp_pass=os.getenv("SMTP_PASS"),
        smtp_from=os.getenv("SMTP_FROM", "Auth System <auth@example.com>"),
        smtp_starttls=_env_flag("SMTP_STARTTLS", "true"),
        smtp_timeout=float(os.getenv("SMTP_TIMEOUT", "10")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings
