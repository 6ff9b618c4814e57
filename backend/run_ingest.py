from __future__ import annotations
import sys

from jobcatalog.core.config import settings
from jobcatalog.core.logging import configure_logging
from jobcatalog.db.database import SessionLocal
from jobcatalog.db.init_db import init_db
from jobcatalog.schemas.run import ScrapeRunOut
from jobcatalog.services.ingest_service import list_runs, run_cycle


if __name__ == "__main__":
    configure_logging(settings.log_level)
    init_db()
    db = SessionLocal()
    try:
        result = run_cycle(db, sys.argv[1:] or None)
        print(result)
        for run in list_runs(db, limit=len(result["sources"])):
            print(ScrapeRunOut.model_validate(run).model_dump())
    finally:
        db.close()
