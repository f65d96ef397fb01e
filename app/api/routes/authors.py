from fastapi import APIRouter, Depends, Path
from app.api.deps import get_author_service
from app.services.author_service import AuthorService
from app.schemas.author import (
    AuthorCreate,
    AuthorDetail,
    AuthorRead,
    AuthorUpdate,
    AuthorWithBookCount,
)
from app.schemas.common import MessageResponse
from app.models.base import MAX_ID
from app.core.logging import get_logger
from typing import Annotated
from starlette.status import HTTP_201_CREATED

router = APIRouter(prefix="/authors", tags=["authors"])

Service = Annotated[AuthorService, Depends(get_author_service)]
AuthorIdPath = Annotated[int, Path(gt=0, le=MAX_ID, description="Author ID")]


@router.get("", response_model=list[AuthorWithBookCount])
def list_authors(service: Service):
    logger = get_logger(__name__)
    logger.info("Listing authors")
    return service.list_authors()


@router.get("/{author_id}", response_model=AuthorDetail)
def get_author(author_id: AuthorIdPath, service: Service):
    return service.get_author(author_id)


@router.post("", response_model=AuthorRead, status_code=HTTP_201_CREATED)
def create_author(data: AuthorCreate, service: Service):
    return service.create_author(data)


@router.put("/{author_id}", response_model=AuthorRead)
def update_author(author_id: AuthorIdPath, data: AuthorUpdate, service: Service):
    return service.update_author(author_id, data)


@router.delete("/{author_id}", response_model=MessageResponse)
def delete_author(author_id: AuthorIdPath, service: Service):
    service.delete_author(author_id)
    return MessageResponse(message="Author deleted successfully")
