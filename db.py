import os
from typing import Generator
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase, Session
from dotenv import load_dotenv
from contextlib import contextmanager

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL")
if not DATABASE_URL:
    raise RuntimeError("DATABASE_URL env var not set")

SQL_ECHO = os.getenv("SQL_ECHO", "0") == "1"

class Base(DeclarativeBase):
    pass

engine = create_engine(DATABASE_URL, future=True, pool_pre_ping=True, echo=SQL_ECHO)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)

def init_db(bind=None):
    # table classes register on Base.metadata when the models package is imported
    import results.models  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)

@contextmanager
def get_db():
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

def get_session() -> Generator[Session, None, None]:
    """
    FastAPI dependency: one session per request, committed when the
    endpoint returns normally, rolled back otherwise.
    """
    with get_db() as db:
        yield db
