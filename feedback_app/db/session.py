# feedback_app/db/session.py
import logging
from typing import Generator
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from feedback_app.core.config import settings

logger = logging.getLogger(__name__)

DB_URL = settings.DATABASE_URL  # e.g., "sqlite:///./feedback_hub.db"

# SQLite-friendly connect args
is_sqlite = DB_URL.startswith("sqlite")
is_memory = is_sqlite and (":memory:" in DB_URL or DB_URL.rstrip("/").endswith(":"))
connect_args = {"check_same_thread": False, "timeout": 30} if is_sqlite else {}

engine_kwargs = {"poolclass": StaticPool} if is_memory else {"pool_pre_ping": True}

engine = create_engine(
    DB_URL,
    connect_args=connect_args,
    **engine_kwargs,
)

# Enable WAL + sane pragmas for SQLite
if is_sqlite:
    @event.listens_for(engine, "connect")
    def _set_sqlite_pragmas(dbapi_connection, connection_record):
        cur = dbapi_connection.cursor()
        try:
            if not is_memory:
                cur.execute("PRAGMA journal_mode=WAL;")
                cur.execute("PRAGMA synchronous=NORMAL;")
            cur.execute("PRAGMA foreign_keys=ON;")
        except Exception as exc:
            logger.warning("could not apply sqlite pragmas: %s", exc)
        finally:
            cur.close()

SessionLocal = sessionmaker(
    bind=engine,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)

def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a request-scoped Session.
    The survey and feedback reads of one analytics request share this session.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
