import os
from typing import List, Optional
from urllib.parse import quote_plus

from dotenv import load_dotenv
from pydantic import BaseModel

# Tests set DISABLE_DOTENV=1 so a developer's .env never leaks into them.
if os.getenv("DISABLE_DOTENV") != "1":
    load_dotenv()

DEFAULT_JWT_SECRET = "super_secret_random_key_CHANGE_THIS"
DEFAULT_MONGO_HOST = "cluster0.jpi5bfv.mongodb.net"

_TRUTHY = {"1", "true", "True", "yes", "YES"}


def _flag(name: str, default: str = "0") -> bool:
    return (os.getenv(name, default) or default).strip() in _TRUTHY


class Settings(BaseModel):
    port: int = 5000
    mongo_uri: str = ""
    database_name: str = "JobPortal"
    jwt_secret: str = DEFAULT_JWT_SECRET
    token_expire_hours: int = 10
    allowed_origins: List[str] = ["http://localhost:5173"]
    cookie_secure: bool = False
    atomic_application_count: bool = False
    mongo_timeout_ms: Optional[int] = None
    log_level: str = "INFO"


def build_mongo_uri(user: str, password: str, host: str = DEFAULT_MONGO_HOST) -> str:
    """Atlas connection string with the credentials URL-quoted."""
    return (
        f"mongodb+srv://{quote_plus(user)}:{quote_plus(password)}@{host}/"
        "?retryWrites=true&w=majority&appName=Cluster0"
    )


def load_settings() -> Settings:
    """Read every recognized environment variable into a Settings object."""
    mongo_uri = os.getenv("MONGO_URI") or build_mongo_uri(
        os.getenv("DB_USER", ""),
        os.getenv("DB_PASS", ""),
        os.getenv("MONGO_HOST", DEFAULT_MONGO_HOST),
    )

    raw_origins = os.getenv("ALLOWED_ORIGINS", "http://localhost:5173")
    origins = [o.strip() for o in raw_origins.split(",") if o.strip()]

    timeout = (os.getenv("MONGO_TIMEOUT_MS") or "").strip()

    return Settings(
        port=int(os.getenv("PORT", "5000") or "5000"),
        mongo_uri=mongo_uri,
        database_name=os.getenv("DATABASE_NAME", "JobPortal"),
        jwt_secret=os.getenv("ACCESS_JWT_SECRET") or DEFAULT_JWT_SECRET,
        token_expire_hours=int(os.getenv("ACCESS_TOKEN_EXPIRE_HOURS", "10") or "10"),
        allowed_origins=origins,
        cookie_secure=_flag("COOKIE_SECURE"),
        atomic_application_count=_flag("ATOMIC_APPLICATION_COUNT"),
        mongo_timeout_ms=int(timeout) if timeout else None,
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
