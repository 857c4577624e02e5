import uuid

TRIP_PAYLOAD = {
    "destination": "Rio",
    "owner_name": "Ana",
    "owner_email": "ana@x.com",
    "starts_at": "2025-01-10T00:00:00Z",
    "ends_at": "2025-01-15T00:00:00Z",
    "emails_to_invite": [],
}


async def create_trip(client) -> str:
    res = await client.post("/trips", json=TRIP_PAYLOAD)
    return res.json()["trip_id"]


async def test_invite_then_confirm_participant(client):
    trip_id = await create_trip(client)

    invite = await client.post(f"/trips/{trip_id}/invites", json={"email": "dora@x.com"})
    participant_id = invite.json()["participant_id"]
    first = await client.patch(f"/participants/{participant_id}/confirm")
    second = await client.patch(f"/participants/{participant_id}/confirm")

    assert invite.status_code == 201
    assert first.status_code == 204
    assert second.status_code == 400
    assert second.json() == {"message": "participant already confirmed"}
    [participant] = (await client.get(f"/trips/{trip_id}/participants")).json()["participants"]
    assert participant["email"] == "dora@x.com"
    assert participant["is_confirmed"] is True


async def test_confirm_unknown_participant(fake_client, fake_store):
    res = await fake_client.patch(f"/participants/{uuid.uuid4()}/confirm")

    assert res.status_code == 400
    assert res.json() == {"message": "participant not found"}
    assert "confirm_participant" not in fake_store.calls


async def test_invite_to_unknown_trip(client):
    res = await client.post(f"/trips/{uuid.uuid4()}/invites", json={"email": "dora@x.com"})

    assert res.status_code == 400
    assert res.json() == {"message": "trip not found"}


async def test_invite_with_invalid_email(client):
    trip_id = await create_trip(client)

    res = await client.post(f"/trips/{trip_id}/invites", json={"email": "dora"})

    assert res.status_code == 400
    assert res.json()["message"].startswith("invalid input")


async def test_participants_of_unknown_trip(client):
    res = await client.get(f"/trips/{uuid.uuid4()}/participants")

    assert res.status_code == 400
    assert res.json() == {"message": "trip not found"}
