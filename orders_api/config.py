import os

# Use DATABASE_URL env var when available; falls back to a local SQLite file.
# For Postgres use e.g. postgresql+asyncpg://postgres:postgres@db:5432/orders_db
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./orders.db")
SQL_ECHO = os.getenv("SQL_ECHO", "0").lower() in ("1", "true", "yes")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

ORDER_STATUSES = ("pending", "processing", "completed", "cancelled")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

# column ranges: Integer is 32-bit on Postgres, amount is Numeric(10, 2)
MAX_INTEGER = 2**31 - 1
MAX_AMOUNT = 99999999.99
# LIMIT/OFFSET values are bound as signed 64-bit integers
MAX_OFFSET = 2**63 - 1
