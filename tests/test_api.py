"""Test the HTTP surface: routing and Outcome → status mapping."""
import pytest
from api.main import app
from patterns.outcome import INTERNAL_ERROR_MESSAGE
from verticals.catalog.repository import BookRepository
from verticals.catalog.service import BookCatalog, get_book_catalog

DUNE = {"title": "Dune", "author": "Herbert", "year": 1965, "genre": "SciFi"}


class BrokenRepository(BookRepository):
    async def find_by_genre(self, genre):
        raise RuntimeError("database unavailable")


async def post_book(client, **overrides):
    response = await client.post("/api/books", json={**DUNE, **overrides})
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_root_lists_operations(client):
    body = (await client.get("/")).json()
    assert "find_by_title_or_author" in body["operations"]


@pytest.mark.asyncio
async def test_request_id_is_echoed(client):
    response = await client.get("/health", headers={"X-Request-ID": "abc123"})
    assert response.headers["X-Request-ID"] == "abc123"
    generated = await client.get("/health")
    assert generated.headers["X-Request-ID"]


@pytest.mark.asyncio
async def test_create_and_get(client):
    created = await post_book(client)
    assert created["id"] is not None
    response = await client.get(f"/api/books/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created


@pytest.mark.asyncio
async def test_create_with_id_is_400(client):
    response = await client.post("/api/books", json={**DUNE, "id": 3})
    assert response.status_code == 400
    assert "id" in response.json()["detail"]


@pytest.mark.asyncio
async def test_get_unknown_is_404(client):
    assert (await client.get("/api/books/12345")).status_code == 404


@pytest.mark.asyncio
async def test_out_of_range_id_is_404(client):
    huge = "99999999999999999999"
    assert (await client.get(f"/api/books/{huge}")).status_code == 404
    assert (await client.put(f"/api/books/{huge}", json=DUNE)).status_code == 404
    assert (await client.delete(f"/api/books/{huge}")).status_code == 404


@pytest.mark.asyncio
async def test_oversized_year_threshold_is_400(client):
    response = await client.get(f"/api/books/before/{'9' * 5000}")
    assert response.status_code == 400
    assert "year" in response.json()["detail"]


@pytest.mark.asyncio
async def test_update(client):
    created = await post_book(client)
    response = await client.put(
        f"/api/books/{created['id']}",
        json={"id": 999, "title": "Dune", "author": "Frank Herbert", "year": 1965, "genre": "SciFi"},
    )
    assert response.status_code == 200
    assert response.json()["id"] == created["id"]
    assert response.json()["author"] == "Frank Herbert"
    assert (await client.put("/api/books/999", json=DUNE)).status_code == 404


@pytest.mark.asyncio
async def test_delete(client):
    created = await post_book(client)
    response = await client.delete(f"/api/books/{created['id']}")
    assert response.status_code == 200
    assert str(created["id"]) in response.json()["message"]
    assert (await client.delete(f"/api/books/{created['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_empty_listing_is_404(client):
    assert (await client.get("/api/books")).status_code == 404
    assert (await client.get("/api/books/sorted")).status_code == 404


@pytest.mark.asyncio
async def test_listing_and_sorted(client):
    first = await post_book(client)
    second = await post_book(client, title="Children of Dune", year=1970)
    listing = await client.get("/api/books")
    assert [b["id"] for b in listing.json()] == [first["id"], second["id"]]
    ordered = await client.get("/api/books/sorted")
    assert [b["year"] for b in ordered.json()] == [1970, 1965]


@pytest.mark.asyncio
async def test_by_author(client):
    await post_book(client)
    assert (await client.get("/api/books/by-author/123")).status_code == 400
    assert (await client.get("/api/books/by-author/Nobody")).status_code == 404
    found = await client.get("/api/books/by-author/Herbert")
    assert found.status_code == 200
    assert [b["title"] for b in found.json()] == ["Dune"]


@pytest.mark.asyncio
async def test_by_genre(client):
    await post_book(client)
    assert (await client.get("/api/books/by-genre/42")).status_code == 400
    assert (await client.get("/api/books/by-genre/Horror")).status_code == 404
    assert (await client.get("/api/books/by-genre/SciFi")).status_code == 200


@pytest.mark.asyncio
async def test_search_title(client):
    await post_book(client)
    found = await client.get("/api/books/search/title", params={"title": "dun"})
    assert found.status_code == 200
    assert found.json()[0]["title"] == "Dune"
    missing = await client.get("/api/books/search/title", params={"title": "xyz"})
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_before_year(client):
    await post_book(client)
    await post_book(client, title="Neuromancer", author="Gibson", year=1984)
    assert (await client.get("/api/books/before/abc")).status_code == 400
    assert (await client.get("/api/books/before/1900")).status_code == 404
    found = await client.get("/api/books/before/1970")
    assert [b["title"] for b in found.json()] == ["Dune"]


@pytest.mark.asyncio
async def test_count_by_author(client):
    await post_book(client)
    await post_book(client, title="Dune Messiah", year=1969)
    response = await client.get("/api/books/count/author/Herbert")
    assert response.status_code == 200
    assert response.json() == 2
    assert (await client.get("/api/books/count/author/Nobody")).status_code == 404
    assert (await client.get("/api/books/count/author/007")).status_code == 400


@pytest.mark.asyncio
async def test_title_or_author(client):
    await post_book(client)
    await post_book(client, title="Neuromancer", author="Gibson", year=1984)
    response = await client.get(
        "/api/books/search/title-or-author", params={"title": "neuro", "author": "Herbert"}
    )
    assert response.status_code == 200
    assert {b["title"] for b in response.json()} == {"Dune", "Neuromancer"}
    bad = await client.get(
        "/api/books/search/title-or-author", params={"title": "x", "author": "123"}
    )
    assert bad.status_code == 400
    none = await client.get(
        "/api/books/search/title-or-author", params={"title": "x", "author": "Nobody"}
    )
    assert none.status_code == 404


@pytest.mark.asyncio
async def test_store_failure_is_500_without_detail(client, session):
    app.dependency_overrides[get_book_catalog] = lambda: BookCatalog(BrokenRepository(session))
    response = await client.get("/api/books/by-genre/SciFi")
    assert response.status_code == 500
    assert response.json() == {"detail": INTERNAL_ERROR_MESSAGE}
