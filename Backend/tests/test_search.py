"""Tests for GET /catalog/search."""

import pytest

pytestmark = pytest.mark.usefixtures("catalog")


@pytest.mark.parametrize("url", ["/catalog/search", "/catalog/search?query=", "/catalog/search?query=%20%20"])
async def test_search_requires_a_term(client, url):
    response = await client.get(url)
    assert response.status_code == 400
    assert response.json() == {"error": "A search term is required"}


async def test_search_without_matches(client):
    response = await client.get("/catalog/search", params={"query": "zzzz"})
    assert response.status_code == 200
    assert response.json() == {"artists": [], "albums": [], "songs": []}


async def test_search_is_case_insensitive_across_entities(client):
    response = await client.get("/catalog/search", params={"query": "STEREO"})
    assert response.status_code == 200
    results = response.json()
    assert [artist["id"] for artist in results["artists"]] == ["soda"]
    assert [album["id"] for album in results["albums"]] == ["sueno"]
    assert results["albums"][0]["artist"]["name"] == "Soda Stereo"
    assert results["songs"] == []


async def test_search_songs_are_nested(client):
    response = await client.get("/catalog/search", params={"query": "zam"})
    results = response.json()
    assert results["artists"] == []
    assert results["albums"] == []
    assert [song["id"] for song in results["songs"]] == ["zamba"]
    assert results["songs"][0]["album"]["artist"]["id"] == "sosa"


async def test_search_matches_each_entity_independently(client):
    response = await client.get("/catalog/search", params={"query": "an"})
    results = response.json()
    assert [album["id"] for album in results["albums"]] == ["animal", "cantora"]
    assert "luz" in [song["id"] for song in results["songs"]]
    assert [artist["id"] for artist in results["artists"]] == []


async def test_search_wildcards_are_literal(client):
    response = await client.get("/catalog/search", params={"query": "%"})
    assert response.status_code == 200
    assert response.json() == {"artists": [], "albums": [], "songs": []}
