from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from recruit_form.core.config import settings
from recruit_form.models import Base


def create_draft_engine(url: str | None = None) -> Engine:
    url = url or settings.draft_database_url
    if url in {"sqlite://", "sqlite:///:memory:"}:
        # One shared connection, otherwise every session sees an empty database.
        engine = create_engine(url, connect_args={"check_same_thread": False}, poolclass=StaticPool)
    else:
        engine = create_engine(url, echo=False, pool_pre_ping=True)
    Base.metadata.create_all(engine)
    return engine


def draft_sessionmaker(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)
