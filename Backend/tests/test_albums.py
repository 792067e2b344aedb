"""Tests for the /catalog/albums endpoints."""

import pytest

pytestmark = pytest.mark.usefixtures("catalog")


async def test_list_albums_with_artist(client):
    response = await client.get("/catalog/albums")
    assert response.status_code == 200
    albums = response.json()
    assert [album["id"] for album in albums] == ["animal", "cantora", "sueno"]
    assert albums[1]["artist"]["name"] == "Mercedes Sosa"
    # The list view does not embed songs
    assert "songs" not in albums[0]


async def test_get_album_includes_artist_songs_and_genres(client):
    response = await client.get("/catalog/albums/animal")
    assert response.status_code == 200
    album = response.json()
    assert album["title"] == "Cancion Animal"
    assert album["release_date"] == "1990-08-07"
    assert album["artist"]["id"] == "soda"
    assert sorted(song["id"] for song in album["songs"]) == ["ligera", "luz"]
    assert all(song["album_id"] == "animal" for song in album["songs"])
    assert album["genres"] == [{"id": 1, "name": "Rock"}]


async def test_get_album_not_found(client):
    response = await client.get("/catalog/albums/missing")
    assert response.status_code == 404
    assert response.json() == {"error": "Album with id missing not found"}


@pytest.mark.parametrize("release_date", ["1997-05-21", "1997-05-21T00:00:00.000Z"])
async def test_create_album_release_date_round_trip(client, release_date):
    response = await client.post(
        "/catalog/albums",
        json={"title": "Ok Computer", "release_date": release_date, "artist_id": "garcia"},
    )
    assert response.status_code == 201
    created = response.json()
    assert created["release_date"] == "1997-05-21"
    assert created["songs"] == []
    assert created["genres"] == []

    response = await client.get(f"/catalog/albums/{created['id']}")
    assert response.status_code == 200
    assert response.json()["release_date"] == "1997-05-21"
    assert response.json()["artist"]["name"] == "Charly Garcia"


async def test_create_album_with_genres(client):
    response = await client.post(
        "/catalog/albums",
        json={
            "id": "clics",
            "title": "Clics Modernos",
            "release_date": "1983-11-01",
            "artist_id": "garcia",
            "genre_ids": [1, 3],
        },
    )
    assert response.status_code == 201
    assert sorted(genre["name"] for genre in response.json()["genres"]) == ["Jazz", "Rock"]

    await client.post("/catalog/songs", json={"id": "nos-siguen", "title": "Nos Siguen Pegando Abajo", "album_id": "clics"})

    response = await client.get("/catalog/genres/3/songs")
    assert [song["id"] for song in response.json()] == ["nos-siguen"]


async def test_create_album_with_unknown_genre(client):
    response = await client.post(
        "/catalog/albums",
        json={"title": "Nowhere", "release_date": "2001-01-01", "artist_id": "garcia", "genre_ids": [99]},
    )
    assert response.status_code == 404
    assert response.json() == {"error": "Genre with id 99 not found"}


async def test_create_album_rejects_bad_date(client):
    response = await client.post(
        "/catalog/albums",
        json={"title": "Bad", "release_date": "not-a-date", "artist_id": "garcia"},
    )
    assert response.status_code == 422


async def test_create_album_duplicate_id(client):
    response = await client.post(
        "/catalog/albums",
        json={"id": "animal", "title": "Copy", "release_date": "1990-01-01", "artist_id": "soda"},
    )
    assert response.status_code == 400


async def test_list_album_songs(client):
    response = await client.get("/catalog/albums/animal/songs")
    assert response.status_code == 200
    songs = response.json()
    assert [song["id"] for song in songs] == ["ligera", "luz"]
    assert all(song["album"]["artist"]["id"] == "soda" for song in songs)


async def test_list_album_songs_unknown_album(client):
    response = await client.get("/catalog/albums/missing/songs")
    assert response.status_code == 200
    assert response.json() == []


async def test_create_album_rejects_out_of_range_genre_id(client):
    response = await client.post(
        "/catalog/albums",
        json={"title": "Huge", "release_date": "2001-01-01", "artist_id": "garcia", "genre_ids": [2**40]},
    )
    assert response.status_code == 422
