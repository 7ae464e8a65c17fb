import os
import click
from flask import current_app
from flask.cli import with_appcontext
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from .models import Base

_engine = None
SessionLocal = sessionmaker(autoflush=False, autocommit=False, future=True)


def get_engine(database_url=None):
    """
    SQLAlchemy engine voor DATABASE_URL.
    - Zonder expliciete URL wordt de (gecachte) engine uit de env gebruikt.
    """
    global _engine
    if database_url:
        return create_engine(database_url, future=True)

    if _engine is None:
        url = os.getenv("DATABASE_URL")
        if not url:
            raise RuntimeError("DATABASE_URL is not set.")
        _engine = create_engine(url, future=True)
        SessionLocal.configure(bind=_engine)
    return _engine


def get_session():
    get_engine()
    return SessionLocal()


def init_db(engine):
    """Maak alle tabellen aan die nog niet bestaan."""
    Base.metadata.create_all(bind=engine)


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create the database tables."""
    engine = get_engine(current_app.config.get("DATABASE_URL"))
    init_db(engine)
    click.echo("Database tables created.")
