import inspect
from datetime import date

from conftest import make_record
from interview_board.services.calendar_layout import start_of_week

INTERVIEW_PAYLOAD = {
    "companyName": "Tencent",
    "position": "Full-stack Engineer",
    "date": "2025-03-11",
    "startTime": "14:00",
    "duration": "1.5h",
    "location": "Shenzhen",
    "status": "Scheduled",
    "notes": "",
    "color": "#3b82f6",
}


def test_root_and_health(client):
    assert client.get("/").status_code == 200

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["storage"] == "memory"


def test_create_generates_id(client, store):
    response = client.post("/api/interviews", json=INTERVIEW_PAYLOAD)

    assert response.status_code == 201
    interview = response.json()["interview"]
    assert interview["id"].isdigit()
    assert store.get(interview["id"]).companyName == "Tencent"


def test_create_with_client_id(client, store):
    response = client.post("/api/interviews", json={**INTERVIEW_PAYLOAD, "id": "abc"})

    assert response.json()["interview"]["id"] == "abc"
    assert "abc" in store


def test_create_rejects_unknown_duration(client, store):
    response = client.post("/api/interviews", json={**INTERVIEW_PAYLOAD, "duration": "45min"})

    assert response.status_code == 422
    assert len(store) == 0


def test_create_rejects_bad_start_time(client):
    response = client.post("/api/interviews", json={**INTERVIEW_PAYLOAD, "startTime": "25:00"})

    assert response.status_code == 422


def test_create_normalizes_start_time(client):
    response = client.post("/api/interviews", json={**INTERVIEW_PAYLOAD, "startTime": "9:30"})

    assert response.json()["interview"]["startTime"] == "09:30"


def test_list_and_filter_by_date(client, store):
    store.add(make_record("1", date="2025-03-11"))
    store.add(make_record("2", date="2025-03-12"))

    all_response = client.get("/api/interviews").json()
    day_response = client.get("/api/interviews", params={"date": "2025-03-12"}).json()

    assert all_response["total"] == 2
    assert [i["id"] for i in day_response["interviews"]] == ["2"]


def test_get_missing_interview_is_404(client):
    response = client.get("/api/interviews/nope")

    assert response.status_code == 404
    assert response.json()["detail"]["code"] == "INTERVIEW_NOT_FOUND"


def test_patch_merges_fields(client, store):
    store.add(make_record("1"))

    response = client.patch("/api/interviews/1", json={"status": "Completed", "notes": "done"})

    assert response.status_code == 200
    interview = response.json()["interview"]
    assert interview["status"] == "Completed"
    assert interview["notes"] == "done"
    assert interview["companyName"] == "Tencent"
    assert store.get("1").status == "Completed"


def test_patch_missing_interview_is_noop(client, store):
    response = client.patch("/api/interviews/ghost", json={"companyName": "Ghost"})

    assert response.status_code == 200
    assert response.json()["interview"] is None
    assert len(store) == 0


def test_delete_is_idempotent(client, store):
    store.add(make_record("1"))

    first = client.delete("/api/interviews/1").json()
    second = client.delete("/api/interviews/1").json()

    assert first["deleted"] is True
    assert second["deleted"] is False
    assert len(store) == 0


def test_calendar_week_layout(client, store):
    store.add(make_record("tue", date="2025-03-11", startTime="14:00", duration="1.5h"))
    store.add(make_record("next", date="2025-03-18"))

    response = client.get("/api/calendar/week", params={"start": "2025-03-12"})

    assert response.status_code == 200
    body = response.json()
    assert body["weekStart"] == "2025-03-10"
    assert body["prevWeekStart"] == "2025-03-03"
    assert body["nextWeekStart"] == "2025-03-17"
    assert body["weekDates"][-1] == "2025-03-14"
    assert body["timeSlots"][0] == "09:00"
    [event] = body["events"]
    assert event["interview"]["id"] == "tue"
    assert event["column"] == 1
    assert abs(event["top"] - 400) < 1e-6
    assert abs(event["height"] - 120) < 1e-6
    assert len(store) == 2


def test_calendar_defaults_to_current_week(client):
    body = client.get("/api/calendar/week").json()

    assert body["weekStart"] == start_of_week(date.today()).isoformat()
    assert body["events"] == []


def test_form_draft_and_options(client):
    draft = client.get("/api/form/draft").json()
    options = client.get("/api/form/options").json()

    assert draft["date"] == date.today().isoformat()
    assert draft["duration"] == "1h"
    assert options["durations"] == ["30min", "1h", "1.5h", "2h", "2.5h", "3h"]
    assert options["statuses"] == ["Scheduled", "Completed", "Cancelled"]
    assert options["startTimes"][0] == "09:00"
    assert options["startTimes"][-1] == "17:00"
    assert len(options["startTimes"]) == 17


def test_parse_returns_patch(client, provider_stub):
    provider_stub.reply_fields(companyName="Acme", date="2025-03-12")

    response = client.post(
        "/api/interview-parser",
        json={"text": "Acme interview", "provider": "deepseek", "apiKey": "sk-test"},
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["companyName"] == "Acme"
    assert data["duration"] == "1h"
    assert data["status"] == "Scheduled"


def test_parse_provider_failure_degrades(client, provider_stub):
    provider_stub.reply_content("not json")

    response = client.post(
        "/api/interview-parser",
        json={"text": "Acme interview", "provider": "deepseek", "apiKey": "sk-test"},
    )

    assert response.status_code == 200
    assert response.json()["data"] == {"status": "Scheduled", "color": "#3b82f6"}


def test_parse_rejects_blank_text(client, provider_stub):
    response = client.post(
        "/api/interview-parser",
        json={"text": "   ", "provider": "deepseek", "apiKey": "sk-test"},
    )

    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "INVALID_REQUEST"
    assert provider_stub.requests == []


def test_parse_requires_configured_model(client, provider_stub):
    response = client.post(
        "/api/interview-parser",
        json={"text": "Acme interview", "provider": "doubao", "apiKey": "ark-test"},
    )

    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "MODEL_NOT_CONFIGURED"
    assert provider_stub.requests == []


def test_parse_rejects_unknown_provider(client):
    response = client.post(
        "/api/interview-parser",
        json={"text": "Acme interview", "provider": "gpt-99", "apiKey": "k"},
    )

    assert response.status_code == 422


def test_crud_handlers_run_in_threadpool():
    from interview_board.api.routes import interviews

    handlers = [
        interviews.list_interviews,
        interviews.create_interview,
        interviews.get_interview,
        interviews.update_interview,
        interviews.delete_interview,
    ]

    assert not any(inspect.iscoroutinefunction(handler) for handler in handlers)


def test_error_codes_are_the_ones_routes_raise():
    from interview_board.schemas.common import ErrorCode

    assert {code.value for code in ErrorCode} == {
        "INVALID_REQUEST",
        "INTERVIEW_NOT_FOUND",
        "MODEL_NOT_CONFIGURED",
    }
