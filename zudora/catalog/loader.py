from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from .models import Catalog

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).with_name("colleges.json")


class CatalogError(RuntimeError):
    pass


def load_catalog(path: str | Path | None = None) -> Catalog:
    catalog_path = Path(path) if path else DEFAULT_CATALOG_PATH
    try:
        with catalog_path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
    except OSError as exc:
        raise CatalogError(f"Failed to read college catalog '{catalog_path}': {exc}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Invalid JSON in college catalog '{catalog_path}': {exc}") from exc

    try:
        catalog = Catalog.model_validate(raw)
    except ValidationError as exc:
        raise CatalogError(f"Invalid college catalog '{catalog_path}': {exc}") from exc

    logger.info(
        json.dumps(
            {
                "event": "catalog_loaded",
                "path": str(catalog_path),
                "colleges": len(catalog),
                "branches": catalog.branch_count,
            }
        )
    )
    return catalog
