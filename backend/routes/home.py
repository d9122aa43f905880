"""Home route — plain-text liveness check."""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from errors import NotFoundError

router = APIRouter()

LIVENESS_MESSAGE = "Server is live"


@router.get("/", response_class=PlainTextResponse)
async def home(request: Request) -> str:
    """Lightweight liveness check — no store or upstream access."""
    # Only the bare "/" is the home route; "/?x=1" falls through to 404.
    if request.url.query:
        raise NotFoundError()
    return LIVENESS_MESSAGE
