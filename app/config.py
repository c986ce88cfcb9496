# app/config.py

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


def _postgres_url_from_env():
    # Same PG* variables the node-postgres pool used to pick up
    host = os.getenv("PGHOST")
    database = os.getenv("PGDATABASE")
    if not host or not database:
        return None
    user = os.getenv("PGUSER", "")
    password = os.getenv("PGPASSWORD", "")
    port = os.getenv("PGPORT", "5432")
    credentials = f"{user}:{password}@" if user else ""
    return f"postgresql+psycopg2://{credentials}{host}:{port}/{database}"


DATABASE_URL = os.getenv("DATABASE_URL") or _postgres_url_from_env() or "sqlite:///./barberia.db"

# "require" encrypts the connection without verifying the server certificate
DB_SSLMODE = os.getenv("DB_SSLMODE", "require")
DB_ECHO = os.getenv("DB_ECHO", "false").lower() == "true"

PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]
