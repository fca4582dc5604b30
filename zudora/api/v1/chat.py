from fastapi import APIRouter, Depends, Request

from zudora.api.deps import get_catalog, get_extractor
from zudora.catalog import Catalog
from zudora.core.rate_limit import rate_limit
from zudora.core.security import require_api_key
from zudora.intent.classifier import classify
from zudora.intent.extraction import ScoreCategoryExtractor
from zudora.schemas.chat import ChatRequest, Reply

router = APIRouter()


@router.post("/chat", response_model=Reply, response_model_exclude_none=True)
@rate_limit()
async def chat(
    request: Request,
    payload: ChatRequest,
    catalog: Catalog = Depends(get_catalog),
    extractor: ScoreCategoryExtractor = Depends(get_extractor),
    _: None = Depends(require_api_key),
):
    _ = request
    return classify(payload.message, catalog, extractor)
