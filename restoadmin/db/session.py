from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from restoadmin.core.config import settings


def build_engine(db_url: str):
    if db_url.startswith("sqlite"):
        # in-memory sqlite tüm thread'lerde aynı bağlantıyı paylaşmalı
        kwargs = {"connect_args": {"check_same_thread": False}}
        if db_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(db_url, **kwargs)

    return create_engine(db_url, pool_pre_ping=True)


engine = build_engine(settings.DB_URL)
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
