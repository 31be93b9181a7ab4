"""Books router."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Response, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from bookshelf.api.deps import get_book_service, get_session
from bookshelf.api.schemas.book import INT_MAX, INT_MIN, BookIn, BookOut
from bookshelf.services.book_service import BookService

router = APIRouter()


def _not_found(book_id: int) -> PlainTextResponse:
    return PlainTextResponse(
        f"Error! Book with id {book_id} not found",
        status_code=status.HTTP_404_NOT_FOUND,
    )


@router.get("", response_model=list[BookOut])
async def list_books(
    session: AsyncSession | None = Depends(get_session),
    svc: BookService = Depends(get_book_service),
) -> list[BookOut]:
    books = await svc.list_all(session)
    return [BookOut.model_validate(book) for book in books]


@router.get(
    "/{book_id}",
    response_model=BookOut,
    responses={404: {"description": "No book with this id"}},
)
async def get_book(
    book_id: int = Path(ge=INT_MIN, le=INT_MAX),
    session: AsyncSession | None = Depends(get_session),
    svc: BookService = Depends(get_book_service),
) -> BookOut | Response:
    book = await svc.get_by_id(session, book_id)
    if book is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return BookOut.model_validate(book)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=PlainTextResponse,
    summary="Add a new book",
    responses={400: {"description": "Invalid input"}},
)
async def add_book(
    body: BookIn,
    session: AsyncSession | None = Depends(get_session),
    svc: BookService = Depends(get_book_service),
) -> PlainTextResponse:
    new_id = await svc.create(session, body.to_model())
    return PlainTextResponse(str(new_id), status_code=status.HTTP_201_CREATED)


@router.put("/{book_id}", response_class=PlainTextResponse)
async def update_book(
    body: BookIn,
    book_id: int = Path(ge=INT_MIN, le=INT_MAX),
    session: AsyncSession | None = Depends(get_session),
    svc: BookService = Depends(get_book_service),
) -> PlainTextResponse:
    if not await svc.update(session, book_id, body.to_model()):
        return _not_found(book_id)
    return PlainTextResponse("Book updated successfully!")


@router.delete("/{book_id}", response_class=PlainTextResponse, include_in_schema=False)
async def delete_book(
    book_id: int = Path(ge=INT_MIN, le=INT_MAX),
    session: AsyncSession | None = Depends(get_session),
    svc: BookService = Depends(get_book_service),
) -> PlainTextResponse:
    if not await svc.delete(session, book_id):
        return _not_found(book_id)
    return PlainTextResponse("Book deleted")
