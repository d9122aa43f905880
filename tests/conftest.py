"""Shared test fixtures."""

import httpx
import pytest


def make_photo(photo_id, **fields) -> dict:
    photo = {
        "albumId": 1,
        "id": photo_id,
        "title": f"photo {photo_id}",
        "url": f"https://via.placeholder.com/600/{photo_id}",
        "thumbnailUrl": f"https://via.placeholder.com/150/{photo_id}",
    }
    photo.update(fields)
    return photo


def mock_client(handler) -> httpx.AsyncClient:
    """AsyncClient whose requests are answered by ``handler`` instead of the network."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture
def photos():
    return [make_photo(i) for i in range(1, 6)]
