from contextlib import asynccontextmanager
import logging

from zudora.api.deps import get_session_controller
from zudora.catalog import get_default_catalog

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    catalog = get_default_catalog()
    controller = get_session_controller()
    logger.info("catalog_ready colleges=%d branches=%d", len(catalog), catalog.branch_count)
    yield
    controller.close()
    logger.info("history_store_closed")
