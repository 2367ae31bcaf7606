from datetime import date, timedelta

CENTER = "מרכז"


def create_client(client, **overrides):
    payload = {"name": "שרה כהן", "phone": "054-1234567", "address": "הרצל 12, תל אביב", "area": CENTER}
    payload.update(overrides)
    response = client.post("/clients", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def put_plan(client, client_id, **overrides):
    payload = {
        "baseIntervalDays": 30,
        "wastePreference": "IGNORE",
        "lastVisitDate": date.today().isoformat(),
        "seasonalAdjustments": {},
    }
    payload.update(overrides)
    response = client.put(f"/clients/{client_id}/plan", json=payload)
    assert response.status_code == 200, response.text
    return response.json()


def book(client, client_id, day, start, end, **extra):
    payload = {"clientId": client_id, "date": day, "startTime": start, "endTime": end}
    payload.update(extra)
    return client.post("/appointments", json=payload)


# ---------------------------------------------------------------------------
# Clients and plans
# ---------------------------------------------------------------------------


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_client_crud(client):
    created = create_client(client)
    assert created["area"] == CENTER

    updated = client.patch(f"/clients/{created['id']}", json={"notes": "Dog in the yard"})
    assert updated.status_code == 200
    assert updated.json()["notes"] == "Dog in the yard"
    assert updated.json()["name"] == "שרה כהן"

    assert [c["id"] for c in client.get("/clients").json()] == [created["id"]]

    assert client.delete(f"/clients/{created['id']}").status_code == 200
    assert client.get(f"/clients/{created['id']}").status_code == 404


def test_invalid_phone_is_rejected(client):
    response = client.post("/clients", json={"name": "דוד", "phone": "12345", "area": CENTER})
    assert response.status_code == 422


def test_phone_whitespace_is_removed(client):
    created = create_client(client, phone="03 1234567")
    assert created["phone"] == "031234567"


def test_plan_round_trip_includes_target_date(client):
    created = create_client(client)
    plan = put_plan(
        client,
        created["id"],
        lastVisitDate="2023-10-01",
        wastePreference="AVOID",
        seasonalAdjustments={"9": -5},
    )
    assert plan["targetDate"] == "2023-10-26"
    assert plan["seasonalAdjustments"] == {"9": -5}

    fetched = client.get(f"/clients/{created['id']}/plan").json()
    assert fetched == plan


def test_plan_rejects_bad_month(client):
    created = create_client(client)
    response = client.put(
        f"/clients/{created['id']}/plan",
        json={"baseIntervalDays": 30, "lastVisitDate": "2023-10-01", "seasonalAdjustments": {"12": 3}},
    )
    assert response.status_code == 422


def test_missing_plan_is_404(client):
    created = create_client(client)
    assert client.get(f"/clients/{created['id']}/plan").status_code == 404


# ---------------------------------------------------------------------------
# Manual appointment entry
# ---------------------------------------------------------------------------


def test_appointment_waste_flag_is_computed(client):
    created = create_client(client)
    client.post("/waste-rules", json={"area": CENTER, "dayOfWeek": 2})

    tuesday = book(client, created["id"], "2023-10-24", "08:00", "10:00")
    wednesday = book(client, created["id"], "2023-10-25", "08:00", "10:00")

    assert tuesday.status_code == 201
    assert tuesday.json()["isWastePickupDay"] is True
    assert wednesday.json()["isWastePickupDay"] is False


def test_overlapping_appointment_is_409(client):
    created = create_client(client)
    assert book(client, created["id"], "2023-10-24", "08:00", "10:00").status_code == 201

    response = book(client, created["id"], "2023-10-24", "09:00", "11:00")
    assert response.status_code == 409

    assert book(client, created["id"], "2023-10-24", "10:00", "11:00").status_code == 201


def test_validation_errors_are_collected(client):
    created = create_client(client)
    book(client, created["id"], "2023-10-24", "08:00", "10:00")

    response = book(client, created["id"], "2023-10-24", "09:00", "08:30", price=-10)
    assert response.status_code == 400
    assert response.json()["detail"] == [
        "End time must be later than start time.",
        "Price cannot be negative.",
        "The visit overlaps an existing visit in the calendar.",
    ]


def test_badly_formatted_time_is_422(client):
    created = create_client(client)
    assert book(client, created["id"], "2023-10-24", "8:00", "10:00").status_code == 422


def test_editing_appointment_ignores_itself(client):
    created = create_client(client)
    first = book(client, created["id"], "2023-10-24", "08:00", "10:00").json()
    book(client, created["id"], "2023-10-24", "12:00", "13:00")

    response = client.patch(
        f"/appointments/{first['id']}", json={"endTime": "11:00", "instructions": "גיזום"}
    )
    assert response.status_code == 200
    assert response.json()["endTime"] == "11:00"

    clash = client.patch(f"/appointments/{first['id']}", json={"startTime": "12:30", "endTime": "13:30"})
    assert clash.status_code == 409


def test_moving_appointment_updates_waste_flag(client):
    created = create_client(client)
    client.post("/waste-rules", json={"area": CENTER, "dayOfWeek": 2})
    appointment = book(client, created["id"], "2023-10-25", "08:00", "10:00").json()

    moved = client.patch(f"/appointments/{appointment['id']}", json={"date": "2023-10-24"})
    assert moved.json()["isWastePickupDay"] is True

    moved_back = client.patch(f"/appointments/{appointment['id']}", json={"date": "2023-10-25"})
    assert moved_back.json()["isWastePickupDay"] is False


def test_list_and_delete_appointments(client):
    created = create_client(client)
    other = create_client(client, name="דוד לוי", area="צפון")
    book(client, created["id"], "2023-10-24", "08:00", "10:00")
    booked = book(client, other["id"], "2023-10-25", "08:00", "10:00").json()

    assert len(client.get("/appointments").json()) == 2
    assert len(client.get("/appointments", params={"date": "2023-10-25"}).json()) == 1
    assert len(client.get("/appointments", params={"client_id": created["id"]}).json()) == 1

    assert client.delete(f"/appointments/{booked['id']}").status_code == 200
    assert client.get(f"/appointments/{booked['id']}").status_code == 404


def test_deleting_client_removes_visits(client):
    created = create_client(client)
    book(client, created["id"], "2023-10-24", "08:00", "10:00")
    client.delete(f"/clients/{created['id']}")
    assert client.get("/appointments").json() == []


# ---------------------------------------------------------------------------
# Waste rules
# ---------------------------------------------------------------------------


def test_waste_rule_crud(client):
    rule = client.post("/waste-rules", json={"area": CENTER, "dayOfWeek": 2}).json()
    client.post("/waste-rules", json={"area": "צפון", "dayOfWeek": 4})

    assert len(client.get("/waste-rules").json()) == 2
    assert client.get("/waste-rules", params={"area": CENTER}).json() == [rule]

    assert client.delete(f"/waste-rules/{rule['id']}").status_code == 200
    assert client.delete(f"/waste-rules/{rule['id']}").status_code == 404


def test_waste_rule_day_out_of_range(client):
    assert client.post("/waste-rules", json={"area": CENTER, "dayOfWeek": 7}).status_code == 422


def test_waste_day_endpoint(client):
    client.post("/waste-rules", json={"area": CENTER, "dayOfWeek": 2})

    tuesday = client.get("/scheduling/waste-day", params={"date": "2023-10-24", "area": CENTER})
    assert tuesday.json() == {"date": "2023-10-24", "area": CENTER, "isWastePickupDay": True}

    other_area = client.get("/scheduling/waste-day", params={"date": "2023-10-24", "area": "צפון"})
    assert other_area.json()["isWastePickupDay"] is False

    bad = client.get("/scheduling/waste-day", params={"date": "24/10/2023", "area": CENTER})
    assert bad.status_code == 400


# ---------------------------------------------------------------------------
# Smart scheduling
# ---------------------------------------------------------------------------


def test_suggestions_for_client(client):
    created = create_client(client)
    plan = put_plan(client, created["id"])

    response = client.get(f"/scheduling/clients/{created['id']}/suggestions")
    assert response.status_code == 200
    body = response.json()

    assert body["clientId"] == created["id"]
    assert body["targetDate"] == plan["targetDate"]
    assert 1 <= len(body["suggestions"]) <= 3
    scores = [s["score"] for s in body["suggestions"]]
    assert scores == sorted(scores, reverse=True)
    assert set(body["suggestions"][0]) == {"date", "score", "reason", "wasteConflict"}


def test_full_target_day_is_skipped(client):
    created = create_client(client)
    plan = put_plan(client, created["id"])
    target = plan["targetDate"]

    for start, end in [("07:00", "08:00"), ("09:00", "10:00"), ("13:00", "14:00"), ("17:00", "18:00")]:
        assert book(client, created["id"], target, start, end).status_code == 201

    body = client.get(f"/scheduling/clients/{created['id']}/suggestions").json()
    assert target not in [s["date"] for s in body["suggestions"]]


def test_old_plan_has_no_suggestions(client):
    created = create_client(client)
    put_plan(client, created["id"], lastVisitDate="2023-10-01")

    body = client.get(f"/scheduling/clients/{created['id']}/suggestions").json()
    assert body["suggestions"] == []


def test_suggestions_require_plan(client):
    created = create_client(client)
    assert client.get(f"/scheduling/clients/{created['id']}/suggestions").status_code == 404
    assert client.get("/scheduling/clients/999/suggestions").status_code == 404


def test_book_suggestion(client):
    created = create_client(client)
    put_plan(client, created["id"])
    suggestion = client.get(f"/scheduling/clients/{created['id']}/suggestions").json()["suggestions"][0]

    response = client.post(
        f"/scheduling/clients/{created['id']}/book",
        json={"date": suggestion["date"], "startTime": "10:00"},
    )
    assert response.status_code == 201
    visit = response.json()
    assert visit["date"] == suggestion["date"]
    assert (visit["startTime"], visit["endTime"]) == ("10:00", "11:00")
    assert visit["type"] == "Recurring"
    assert visit["instructions"] == "Created by smart scheduler"

    again = client.post(
        f"/scheduling/clients/{created['id']}/book",
        json={"date": suggestion["date"], "startTime": "10:30"},
    )
    assert again.status_code == 409


def test_book_suggestion_defaults_to_morning(client):
    created = create_client(client)
    put_plan(client, created["id"])
    day = (date.today() + timedelta(days=30)).isoformat()

    visit = client.post(f"/scheduling/clients/{created['id']}/book", json={"date": day}).json()
    assert (visit["startTime"], visit["endTime"]) == ("08:00", "09:00")


def test_book_suggestion_past_midnight_is_rejected(client):
    created = create_client(client)
    put_plan(client, created["id"])
    day = (date.today() + timedelta(days=30)).isoformat()

    response = client.post(
        f"/scheduling/clients/{created['id']}/book", json={"date": day, "startTime": "23:30"}
    )
    assert response.status_code == 400
