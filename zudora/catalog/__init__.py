from functools import lru_cache

from .loader import CatalogError, load_catalog
from .models import CATEGORY_CODES, Branch, Catalog, CategoryCode, College


@lru_cache(maxsize=1)
def get_default_catalog() -> Catalog:
    from zudora.core.config import settings

    return load_catalog(settings.catalog_path)


__all__ = [
    "CATEGORY_CODES",
    "Branch",
    "Catalog",
    "CatalogError",
    "CategoryCode",
    "College",
    "get_default_catalog",
    "load_catalog",
]
