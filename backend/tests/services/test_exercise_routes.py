"""Exercise Routes — add-exercise validation order and response shape over HTTP.

Invariants:
    - Invalid userId reported before any other field problem
    - Supplied YYYY-MM-DD dates come back unchanged
    - Omitted/malformed dates become today's date
"""

from datetime import date

import pytest


@pytest.fixture
async def alice(register):
    return await register("alice")


async def _add(client, **fields):
    return await client.post("/api/exercise/add", data=fields)


async def test_unknown_user_id(client):
    res = await _add(client, userId="nobody", description="run", duration="30")
    assert res.status_code == 400
    assert res.text == "Invalid userId."


async def test_unknown_user_id_wins_over_missing_fields(client):
    res = await _add(client, userId="nobody")
    assert res.text == "Invalid userId."


async def test_description_required(client, alice):
    res = await _add(client, userId=alice["id"], duration="30")
    assert res.status_code == 400
    assert res.text == "Description required."


async def test_duration_required(client, alice):
    res = await _add(client, userId=alice["id"], description="run")
    assert res.status_code == 400
    assert res.text == "Duration required."


@pytest.mark.parametrize("duration", ["0", "-10"])
async def test_duration_must_be_positive(client, alice, duration):
    res = await _add(
        client, userId=alice["id"], description="run", duration=duration,
    )
    assert res.status_code == 400
    assert res.text == "Duration must be greater than 0."


async def test_impossible_date_rejected(client, alice):
    res = await _add(
        client, userId=alice["id"], description="run", duration="30",
        date="2023-02-30",
    )
    assert res.status_code == 400
    assert res.text == "Invalid date."


async def test_add_exercise_with_date(client, alice):
    res = await _add(
        client, userId=alice["id"], description="run", duration="30",
        date="2023-05-01",
    )
    assert res.status_code == 200
    body = res.json()
    assert body["username"] == "alice"
    assert body["id"]
    assert body["description"] == "run"
    assert body["duration"] == 30
    assert body["date"] == "2023-05-01"


@pytest.mark.parametrize("date_field", [{}, {"date": ""}, {"date": "soon"}])
async def test_add_exercise_defaults_to_today(client, alice, date_field):
    res = await _add(
        client, userId=alice["id"], description="run", duration="30",
        **date_field,
    )
    assert res.status_code == 200
    assert res.json()["date"] == date.today().isoformat()


async def test_add_exercise_accepts_json_numbers(client, alice):
    res = await client.post("/api/exercise/add", json={
        "userId": alice["id"], "description": "swim", "duration": 12.5,
        "date": "2023-07-04",
    })
    assert res.status_code == 200
    assert res.json()["duration"] == 12.5


async def test_malformed_json_body(client):
    res = await client.post(
        "/api/exercise/add", content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.text == "Malformed JSON body."


async def test_json_body_that_is_not_utf8(client):
    res = await client.post(
        "/api/exercise/add", content=b'{"userId": "\xff"}',
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.headers["content-type"].startswith("text/plain")
    assert res.text == "Malformed JSON body."


async def test_json_description_must_be_text(client, alice):
    res = await client.post("/api/exercise/add", json={
        "userId": alice["id"], "description": ["run"], "duration": 30,
    })
    assert res.status_code == 400
    assert res.text == "Description must be a string."
