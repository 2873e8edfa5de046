from httpx import AsyncClient
import pytest


@pytest.mark.asyncio
async def test_export_artists(httpx_client: AsyncClient):
    filmography = {"dramas": [{"title": "A"}], "movies": [], "commercials": []}
    await httpx_client.post("/api/artists", json={"name": "Kim", "filmography": filmography})

    response = await httpx_client.get("/api/export/artists")
    assert response.status_code == 200
    assert response.json() == {
        "Kim": {
            "title": "Kim - 아크리드 아티스트",
            "filmography": filmography,
            "mainPhoto": None,
        }
    }


@pytest.mark.asyncio
async def test_export_artists_by_id(httpx_client: AsyncClient):
    artist_id = (await httpx_client.post("/api/artists", json={"name": "Kim"})).json()["artistId"]

    response = await httpx_client.get("/api/export/artists", params={"key": "id"})
    assert response.status_code == 200
    assert response.json()[artist_id]["name"] == "Kim"


@pytest.mark.asyncio
async def test_export_artists_bad_key(httpx_client: AsyncClient):
    response = await httpx_client.get("/api/export/artists", params={"key": "slug"})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_export_filmography(httpx_client: AsyncClient):
    await httpx_client.post("/api/artists", json={"name": "Kim", "filmography": {"movies": [{"title": "M"}]}})
    await httpx_client.post("/api/artists", json={"name": "Lee"})

    response = await httpx_client.get("/api/export/filmography")
    assert response.status_code == 200
    assert response.json() == {"Kim": {"movies": [{"title": "M"}]}}
