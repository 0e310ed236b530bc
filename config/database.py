"""
Database setup for the user profile store.

Provides the SQLAlchemy engine, session factory and declarative base
shared by the models and repositories.
"""

import threading

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from config.settings import get_settings

settings = get_settings()

# SQLite connections are shared with Streamlit's script threads
connect_args = {"check_same_thread": False} if settings.is_sqlite else {}

engine = create_engine(settings.database_url, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

_ready_binds = set()
_ready_lock = threading.Lock()


def get_db():
    """Yield a database session and close it afterwards."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Create all tables that don't exist yet."""
    # Import entities so they register with Base.metadata
    import models.entities  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def ensure_db(bind=None):
    """
    Create tables the first time a database is used in this process.

    Any page can be the first one a visitor opens, so services call this
    instead of relying on the home page to have run init_db().
    """
    bind = bind or engine
    with _ready_lock:
        if bind in _ready_binds:
            return
        init_db(bind=bind)
        _ready_binds.add(bind)
