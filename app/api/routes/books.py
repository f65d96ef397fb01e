from fastapi import APIRouter, Depends, Path
from app.api.deps import get_book_service
from app.services.book_service import BookService
from app.schemas.book import BookCreate, BookRead, BookUpdate
from app.schemas.common import MessageResponse
from app.models.base import MAX_ID
from typing import Annotated
from starlette.status import HTTP_201_CREATED

router = APIRouter(prefix="/books", tags=["books"])

Service = Annotated[BookService, Depends(get_book_service)]
BookIdPath = Annotated[int, Path(gt=0, le=MAX_ID, description="Book ID")]


@router.get("", response_model=list[BookRead])
def list_books(service: Service):
    return service.list_books()


@router.get("/{book_id}", response_model=BookRead)
def get_book(book_id: BookIdPath, service: Service):
    return service.get_book(book_id)


@router.post("", response_model=BookRead, status_code=HTTP_201_CREATED)
def create_book(data: BookCreate, service: Service):
    return service.create_book(data)


@router.put("/{book_id}", response_model=BookRead)
def update_book(book_id: BookIdPath, data: BookUpdate, service: Service):
    return service.update_book(book_id, data)


@router.delete("/{book_id}", response_model=MessageResponse)
def delete_book(book_id: BookIdPath, service: Service):
    service.delete_book(book_id)
    return MessageResponse(message="Book deleted successfully")
