import pytest


def test_get_user_by_formatted_number(client, seed):
    user_id = seed.user()
    response = client.get("/api/v1/users/+91 98765-43210")
    assert response.status_code == 200
    body = response.json()
    assert body["id"] == user_id
    assert body["mobileNumber"] == "9876543210"
    assert body["fiddleFitnessCoins"] == 50
    assert body["city"] == "Bengaluru"


def test_get_unknown_user(client, seed):
    seed.user()
    response = client.get("/api/v1/users/9000000000")
    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}


def test_registrations_require_api_key(client, seed):
    seed.user()
    response = client.get("/api/v1/users/9876543210/registrations")
    assert response.status_code == 401
    response = client.get("/api/v1/users/9876543210/registrations", headers={"X-API-Key": "wrong"})
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid API key"}


def test_registrations_accept_query_api_key(client, seed):
    seed.user()
    response = client.get("/api/v1/users/9876543210/registrations", params={"apiKey": "test-api-key"})
    assert response.status_code == 200


def test_registrations_split_upcoming_and_past(client, seed, api_key_headers):
    user_id = seed.user()
    upcoming = seed.event(title="Evening HIIT", event_date=seed.ts(days=3))
    past = seed.event(title="Old Yoga", event_date=seed.ts(days=-3))
    seed.trainer(upcoming, "Vikram")
    seed.trainer(upcoming, "Anita")
    seed.registration(user_id, upcoming, created_at=seed.ts(hours=-1))
    seed.registration(user_id, past, created_at=seed.ts(days=-5))

    response = client.get("/api/v1/users/98765 43210/registrations", headers=api_key_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["user"]["id"] == user_id
    assert body["totalRegistrations"] == 2

    [next_event] = body["registrations"]["upcoming"]
    assert next_event["eventTitle"] == "Evening HIIT"
    assert next_event["status"] == "Upcoming"
    assert next_event["isPast"] is False
    assert next_event["trainers"] == ["Anita", "Vikram"]

    [old_event] = body["registrations"]["past"]
    assert old_event["eventTitle"] == "Old Yoga"
    assert old_event["status"] == "Completed"
    assert old_event["trainers"] == []


def test_registrations_unknown_user(client, api_key_headers):
    response = client.get("/api/v1/users/9000000000/registrations", headers=api_key_headers)
    assert response.status_code == 404


@pytest.mark.parametrize("code", ["ASHA1", "ASHA1 - Asha Rao", "  ASHA1  "])
def test_referral_code_valid(client, seed, code):
    seed.user(referral_code="ASHA1")
    response = client.post("/api/v1/users/referral", json={"referralCode": code})
    assert response.status_code == 200
    assert response.json() == {"valid": True, "referralCode": "ASHA1 - Asha Rao"}


def test_referral_code_unknown(client, seed):
    seed.user(referral_code="ASHA1")
    response = client.post("/api/v1/users/referral", json={"referralCode": "NOPE9"})
    assert response.status_code == 200
    assert response.json() == {"valid": False, "referralCode": "INVALID CODE!"}


@pytest.mark.parametrize("body", [{}, {"referralCode": ""}, {"referralCode": "   "}])
def test_referral_code_required(client, body):
    response = client.post("/api/v1/users/referral", json=body)
    assert response.status_code == 400
    assert response.json() == {"error": "Referral code is required"}
