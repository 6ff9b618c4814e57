from __future__ import annotations
from typing import Callable

from jobcatalog.crawlers.base import SourceAdapter

# Site id -> adapter class. Site adapters live outside this package and register here.
ADAPTERS: dict[str, type[SourceAdapter]] = {}


def register_adapter(site_id: str) -> Callable[[type[SourceAdapter]], type[SourceAdapter]]:
    def decorator(cls: type[SourceAdapter]) -> type[SourceAdapter]:
        cls.source_name = site_id
        ADAPTERS[site_id] = cls
        return cls

    return decorator
