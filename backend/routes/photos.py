"""Photo listing route — sorted, paginated reads over the in-memory store."""

from fastapi import APIRouter, Depends, Query, Request

from services.listing import build_listing
from services.store import RecordStore

router = APIRouter()


def get_store(request: Request) -> RecordStore:
    """Resolve the store owned by the running app."""
    return request.app.state.store


# Matches /photos, /photos/ and anything else starting with /photos.
# Query values stay raw strings so malformed input falls back to defaults
# instead of failing validation.
@router.get("/photos{rest:path}")
def list_photos(
    limit: str | None = Query(None),
    page: str | None = Query(None),
    order_by: str | None = Query(None, alias="orderBy"),
    store: RecordStore = Depends(get_store),
) -> dict:
    """Page through stored photos ordered by any field."""
    return build_listing(store.snapshot(), limit=limit, page=page, order_by=order_by)
