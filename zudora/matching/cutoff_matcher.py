"""Score/category matching against the college catalog."""

from __future__ import annotations

from zudora.catalog.models import Catalog
from zudora.core.assistant_config import get_assistant_value
from zudora.schemas.chat import Suggestion

DEFAULT_LIMIT = int(get_assistant_value("matching.max_suggestions", 10))


def match(
    score: float,
    category: str,
    catalog: Catalog,
    *,
    limit: int | None = None,
) -> list[Suggestion]:
    """Return the branches whose ``category`` cutoff is at or below ``score``.

    Results are ordered by cutoff, highest first, so the most competitive seat
    the student still qualifies for leads the list. Equal cutoffs keep catalog
    order. An empty list means nothing qualified.
    """
    top_n = DEFAULT_LIMIT if limit is None else limit
    if top_n <= 0:
        return []

    suggestions: list[Suggestion] = []
    for college in catalog.colleges:
        for branch in college.branches:
            cutoff = branch.cutoff_for(category)
            if cutoff is None or score < cutoff:
                continue
            suggestions.append(
                Suggestion(
                    college_name=college.college_name,
                    branch_name=branch.branch_name,
                    cutoff=cutoff,
                    address=college.address,
                )
            )

    suggestions.sort(key=lambda item: item.cutoff, reverse=True)
    return suggestions[:top_n]
