"""Catch-all route answering 404 for every unmatched path and method."""

from fastapi import APIRouter

from errors import NotFoundError

router = APIRouter()

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


@router.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
async def not_found() -> None:
    raise NotFoundError()
