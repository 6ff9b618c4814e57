from __future__ import annotations
import logging

from sqlalchemy import text
from sqlalchemy.orm import sessionmaker

from jobcatalog.core.logging import LOG_FORMAT, configure_logging
from jobcatalog.db import database
from jobcatalog.db.database import make_engine


def test_make_engine_uses_given_url():
    engine = make_engine("sqlite+pysqlite:///:memory:")
    assert engine.dialect.name == "sqlite"


def test_get_db_yields_a_session_and_closes_it(monkeypatch):
    engine = make_engine("sqlite+pysqlite:///:memory:")
    monkeypatch.setattr(database, "SessionLocal", sessionmaker(bind=engine, future=True))

    gen = database.get_db()
    db = next(gen)
    assert db.execute(text("select 1")).scalar() == 1
    gen.close()


def test_configure_logging_installs_one_handler():
    logger = configure_logging("debug")
    configure_logging("info")

    handlers = [h for h in logger.handlers if getattr(h, "_jobcatalog", False)]
    assert len(handlers) == 1
    assert handlers[0].formatter._fmt == LOG_FORMAT
    assert logger.level == logging.INFO
