from fastapi import APIRouter, Depends, HTTPException, Query, status

from zudora.api.deps import get_catalog
from zudora.catalog import CATEGORY_CODES, Catalog
from zudora.core.security import require_api_key
from zudora.matching.cutoff_matcher import DEFAULT_LIMIT, match
from zudora.schemas.chat import MatchResponse

router = APIRouter()


@router.get("/colleges/match", response_model=MatchResponse)
def match_colleges(
    score: float = Query(ge=0, le=200),
    category: str = Query(min_length=2, max_length=3),
    limit: int = Query(default=DEFAULT_LIMIT, ge=1, le=50),
    catalog: Catalog = Depends(get_catalog),
    _: None = Depends(require_api_key),
):
    code = category.strip().upper()
    if code not in CATEGORY_CODES:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Unknown category '{category}'. Expected one of: {', '.join(CATEGORY_CODES)}.",
        )
    return MatchResponse(
        score=score,
        category=code,
        suggestions=match(score, code, catalog, limit=limit),
    )
