from fastapi import APIRouter, Depends, Query
from typing import Annotated

from app.api.deps import get_search_service
from app.schemas.search import SearchResult
from app.services.search_service import SearchService

router = APIRouter(prefix="/search", tags=["search"])


@router.get("", response_model=SearchResult)
def search(
    service: Annotated[SearchService, Depends(get_search_service)],
    q: Annotated[str, Query(description="Matched against titles, author names and years")],
):
    return service.search(q)
