from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from degreeplanner.core.config import settings

_connect_args = {}
if settings.database_url.startswith("sqlite"):
    # FastAPI may run sync endpoints on different threads
    _connect_args = {"check_same_thread": False}

engine = create_engine(settings.database_url, connect_args=_connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
