import pytest
from fastapi.testclient import TestClient

from hgimatria.api import app
from hgimatria.gematria import decode


@pytest.fixture
def client(monkeypatch):
    monkeypatch.delenv("HGIMATRIA_TRACE", raising=False)
    return TestClient(app)


def test_encode(client):
    r = client.get("/encode", params={"n": 5784})
    assert r.status_code == 200
    assert r.json() == {"n": 5784, "numeral": "ה'תשפ\"ד"}


def test_encode_zero(client):
    assert client.get("/encode", params={"n": 0}).json()["numeral"] == ""


def test_encode_negative_rejected(client):
    assert client.get("/encode", params={"n": -1}).status_code == 422


def test_decode(client):
    r = client.get("/decode", params={"numeral": 'ט"ו'})
    assert r.json() == {"numeral": 'ט"ו', "value": 15}


def test_decode_blank(client):
    assert client.get("/decode", params={"numeral": "  "}).status_code == 400


def test_check(client):
    assert client.get("/check", params={"word": "ה'א'"}).json() == {
        "word": "ה'א'", "value": 5001, "canonical": True,
    }
    assert client.get("/check", params={"word": 'י"ה'}).json() == {
        "word": 'י"ה', "value": 0, "canonical": False,
    }


@pytest.mark.parametrize("numeral", ["ג' ", " ג'א", 'ט"ו'])
def test_decode_matches_core(client, numeral):
    r = client.get("/decode", params={"numeral": numeral})
    assert r.json() == {"numeral": numeral, "value": decode(numeral)}
