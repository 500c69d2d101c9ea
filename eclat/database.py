from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()

_MEMORY_SQLITE_URLS = {"sqlite://", "sqlite:///:memory:"}


def build_engine(url: str):
    kwargs = {}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in _MEMORY_SQLITE_URLS:
            # one shared connection, otherwise every checkout sees an empty database
            kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


def build_session_factory(engine):
    # registers the tables on Base.metadata
    import eclat.model  # noqa: F401

    Base.metadata.create_all(bind=engine)
    return sessionmaker(autoflush=False, bind=engine)


def get_stores(request: Request):
    return request.app.state.stores


def get_settings(request: Request):
    return request.app.state.settings


def get_feed(request: Request):
    return request.app.state.feed
