from __future__ import annotations

from elemental import Elemental, ElementalCatalog


def _skip(msg: str) -> None:  # pragma: no cover
    try:
        import pytest  # type: ignore

        pytest.skip(msg)
    except Exception:
        raise RuntimeError(msg)


def _client():
    from elemental.api import create_api_app

    try:
        from fastapi.testclient import TestClient
    except Exception as e:  # pragma: no cover
        _skip(f"TestClient not available ({e!r}); install test extras to run this test")
        return None

    catalog = ElementalCatalog()
    Elemental.declare(
        "Car",
        ("honda", {"position": 100}),
        ("toyota", {"position": 30}),
        ("mazda", {"position": 1, "default": True, "origin": "jp"}),
        synonyms={"lexus": "toyota"},
        catalog=catalog,
    )
    Elemental.declare("CommentType", "all", "moderated", "closed", persist_ordinally=True, catalog=catalog)
    Elemental.declare("Empty", catalog=catalog)
    return TestClient(create_api_app(catalog))


def test_list_and_describe_elementals() -> None:
    client = _client()

    res = client.get("/api/elementals")
    assert res.status_code == 200
    assert res.json() == [
        {"name": "Car", "size": 3, "persistOrdinally": False},
        {"name": "CommentType", "size": 3, "persistOrdinally": True},
        {"name": "Empty", "size": 0, "persistOrdinally": False},
    ]

    car = client.get("/api/elementals/car").json()
    assert [m["name"] for m in car["members"]] == ["honda", "toyota", "mazda"]
    assert car["defaults"] == ["mazda"]
    assert car["synonyms"] == {"lexus": "toyota"}
    mazda = car["members"][2]
    assert mazda == {
        "name": "mazda",
        "ordinal": 2,
        "position": 1,
        "display": "mazda",
        "humanized": "Mazda",
        "isDefault": True,
        "value": "mazda",
        "metadata": {"origin": "jp"},
    }

    by_position = client.get("/api/elementals/Car", params={"order": "position"}).json()
    assert [m["name"] for m in by_position["members"]] == ["mazda", "toyota", "honda"]

    assert client.get("/api/elementals/Car", params={"order": "alphabetical"}).status_code == 400
    assert client.get("/api/elementals/Bike").status_code == 404


def test_member_lookup_and_navigation() -> None:
    client = _client()

    assert client.get("/api/elementals/Car/members/Lexus").json()["name"] == "toyota"
    assert client.get("/api/elementals/Car/members/-1").json()["name"] == "mazda"
    assert client.get("/api/elementals/comment_type/members/moderated").json()["value"] == 1

    assert client.get("/api/elementals/Car/members/mazda/succ").json()["name"] == "honda"
    assert client.get("/api/elementals/Car/members/0/pred").json()["name"] == "mazda"

    assert client.get("/api/elementals/Car/members/ford").status_code == 404
    assert client.get("/api/elementals/Car/members/3").status_code == 404
    assert client.get("/api/elementals/Empty/members/0/succ").status_code == 409

    defaults = client.get("/api/elementals/Car/defaults").json()
    assert [d["name"] for d in defaults] == ["mazda"]
    assert client.get("/api/elementals/Empty/defaults").json() == []


def test_healthz() -> None:
    client = _client()
    assert client.get("/healthz").json() == {"ok": True}
