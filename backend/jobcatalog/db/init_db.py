from __future__ import annotations
from jobcatalog.db.database import Base, engine
from jobcatalog.models import job, scrape_run  # noqa: F401  (register tables)


def init_db() -> None:
    Base.metadata.create_all(bind=engine)
