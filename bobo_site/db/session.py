# File: bobo_site/db/session.py

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session

from bobo_site.core.config import settings


def make_engine(database_url: str):
    return create_engine(
        database_url,
        connect_args={"check_same_thread": False} if "sqlite" in database_url else {},
    )


engine = make_engine(settings.database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()
