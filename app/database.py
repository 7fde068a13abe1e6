import logging
import os
from typing import Generator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session, declarative_base
from sqlalchemy.pool import StaticPool

logger = logging.getLogger("catalog.database")

# -------------------------------
# Base class for models
# -------------------------------
Base = declarative_base()

# -------------------------------
# Configuration
# -------------------------------
def get_database_url() -> str:
    """
    Get database URL from environment or fall back to a local SQLite file.

    Priority:
    1. DATABASE_URL from environment
    2. Local SQLite file (catalog.db)
    """
    url = os.getenv("DATABASE_URL")
    if url:
        # Heroku-style URLs use the old postgres:// scheme
        if url.startswith("postgres://"):
            url = url.replace("postgres://", "postgresql://", 1)
        return url

    return "sqlite:///./catalog.db"


SQLALCHEMY_DATABASE_URL = get_database_url()

# -------------------------------
# Engine Configuration
# -------------------------------
def create_database_engine(url: Optional[str] = None) -> Engine:
    """
    Create and configure the SQLAlchemy engine.
    """
    database_url = url or SQLALCHEMY_DATABASE_URL

    engine_args = {
        "echo": os.getenv("SQL_ECHO", "false").lower() == "true",
        "pool_pre_ping": True,
    }

    if database_url.startswith("sqlite"):
        engine_args["connect_args"] = {"check_same_thread": False}
        # In-memory databases only exist on a single connection
        if ":memory:" in database_url or database_url == "sqlite://":
            engine_args["poolclass"] = StaticPool
    else:
        engine_args.update({
            "pool_recycle": 300,
            "pool_size": 10,
            "max_overflow": 20,
            "pool_timeout": 30,
        })

    return create_engine(database_url, **engine_args)


engine = create_database_engine()

# -------------------------------
# Session Factory
# -------------------------------
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    expire_on_commit=False,
)

# -------------------------------
# FastAPI Dependency
# -------------------------------
def get_db() -> Generator[Session, None, None]:
    """
    Dependency function that yields a database session.

    Usage in FastAPI:
        db: Session = Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

# -------------------------------
# Database Health Check
# -------------------------------
def check_database_connection(bind: Optional[Engine] = None) -> bool:
    """
    Check if database is accessible.
    Returns True if successful, False otherwise.
    """
    try:
        with (bind or engine).connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error("Database connection error: %s", e)
        return False

# -------------------------------
# Database Initialization
# -------------------------------
def init_db(bind: Optional[Engine] = None) -> None:
    """
    Create all tables. Safe to call on every startup.
    """
    bind = bind or engine
    if not check_database_connection(bind):
        raise RuntimeError("Cannot connect to database")

    Base.metadata.create_all(bind=bind)
    logger.info("Database tables ready")
