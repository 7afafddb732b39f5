from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()


def create_database_engine(database_url: str) -> Engine:
    """
    In-memory SQLite needs one shared connection, otherwise every session sees an empty database.
    """
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(database_url)


def create_session_factory(engine: Engine) -> sessionmaker:
    Base.metadata.create_all(bind=engine)
    return sessionmaker(bind=engine)
