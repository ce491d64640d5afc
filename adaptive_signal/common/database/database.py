import os
from typing import Optional
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

# Default to a local SQLite file if not specified
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    "sqlite:///./adaptive_signal.db"
)

Base = declarative_base()

def create_db_engine(url: Optional[str] = None, **kwargs) -> Engine:
    """Creates an engine. SQLite connections are shared across request threads."""
    url = url or DATABASE_URL
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(url, pool_pre_ping=True, **kwargs)

def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)

def init_db(engine: Engine):
    """Initialize database tables."""
    # Import models here to ensure they are registered with Base
    from . import models
    Base.metadata.create_all(bind=engine)
