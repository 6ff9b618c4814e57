from __future__ import annotations
from jobcatalog.schemas.filters import JobFilter
from jobcatalog.schemas.run import ScrapeRunOut

__all__ = ["JobFilter", "ScrapeRunOut"]
