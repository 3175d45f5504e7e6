import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://localhost:5174",
    "http://localhost:5175",
]


class Settings(BaseModel):
    demo_mode: bool = False
    environment: str = "development"

    supabase_url: Optional[str] = None
    supabase_anon_key: Optional[str] = None
    supabase_service_role_key: Optional[str] = None

    jwt_secret: str = "your-jwt-secret-key"
    session_days: int = 7
    cookie_name: str = "auth_token"

    cors_origins: List[str] = DEFAULT_CORS_ORIGINS
    cors_origin_regex: Optional[str] = r"https://.*\.netlify\.(app|live)"

    database_url: str = "sqlite://"  # demo store, in memory unless overridden
    log_file: Optional[str] = None
    log_level: str = "INFO"
    port: int = 5000

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def supabase_configured(self) -> bool:
        return bool(self.supabase_url and self.supabase_service_role_key)


def _split(value: Optional[str]) -> Optional[List[str]]:
    if not value:
        return None
    return [v.strip() for v in value.split(",") if v.strip()]


def load_settings(environ=None) -> Settings:
    """Build the settings object once from the process environment (and .env)."""
    if environ is None:
        load_dotenv()
        environ = os.environ

    values = {
        "demo_mode": environ.get("DEMO_MODE", "").lower() == "true",
        "environment": environ.get("ENVIRONMENT") or environ.get("NODE_ENV") or "development",
        "supabase_url": environ.get("SUPABASE_URL"),
        "supabase_anon_key": environ.get("SUPABASE_ANON_KEY"),
        "supabase_service_role_key": environ.get("SUPABASE_SERVICE_ROLE_KEY"),
        "log_file": environ.get("LOG_FILE"),
    }
    if environ.get("JWT_SECRET"):
        values["jwt_secret"] = environ["JWT_SECRET"]
    if environ.get("SESSION_DAYS"):
        values["session_days"] = int(environ["SESSION_DAYS"])
    if environ.get("DATABASE_URL"):
        values["database_url"] = environ["DATABASE_URL"]
    if environ.get("LOG_LEVEL"):
        values["log_level"] = environ["LOG_LEVEL"].upper()
    if environ.get("PORT"):
        values["port"] = int(environ["PORT"])
    origins = _split(environ.get("CORS_ORIGINS"))
    if origins:
        values["cors_origins"] = origins

    return Settings(**values)
