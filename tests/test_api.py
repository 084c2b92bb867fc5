import pytest
from fastapi.testclient import TestClient

from weekly_report import __version__
from weekly_report.api.main import create_app
from weekly_report.config import load_config


class FakeArchiver:
    def __init__(self):
        self.calls = []

    def persist(self, payload, pdf_bytes):
        self.calls.append((payload, pdf_bytes))


def _day(content="実験", **overrides):
    day = {
        "stayStart": "09:00",
        "stayEnd": "18:00",
        "breakStart": "12:00",
        "breakEnd": "13:00",
        "content": content,
    }
    day.update(overrides)
    return day


def _report(**overrides):
    body = {
        "yearLabel": "2025",
        "name": "山田 太郎",
        "referenceDate": "2025-04-07",
        "prevWeekDays": [_day() for _ in range(7)],
        "currentWeekDays": [_day("予定") for _ in range(7)],
        "prevGoal": "論文を読む",
        "prevGoalResultPercent": 70,
        "achievedPoints": "装置の調整",
        "issues": "時間不足",
        "currentGoal": "測定を行う",
        "notes": "",
    }
    body.update(overrides)
    return body


@pytest.fixture
def archiver():
    return FakeArchiver()


@pytest.fixture
def rendered():
    return []


@pytest.fixture
def client(archiver, rendered):
    def renderer(payload):
        rendered.append(payload)
        return b"%PDF-1.4 test"

    app = create_app(config=load_config(env={}), archiver=archiver, renderer=renderer)
    return TestClient(app)


def test_health(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": __version__}


def test_weeks_for_reference(client):
    response = client.get("/api/v1/weeks", params={"reference": "2025-04-09"})

    assert response.status_code == 200
    data = response.json()
    assert data["prevWeekLabel"] == "2025/04/07〜2025/04/13"
    assert data["currentWeekLabel"] == "2025/04/14〜2025/04/20"
    assert data["submissionDate"] == "2025-04-14"
    assert data["prevWeekDays"][0] == {"iso": "2025-04-07", "label": "2025-04-07 (月)"}
    assert len(data["currentWeekDays"]) == 7


def test_weeks_default_to_last_week(client):
    data = client.get("/api/v1/weeks").json()
    assert len(data["prevWeekDays"]) == 7
    assert data["yearLabel"]


def test_weeks_invalid_reference(client):
    response = client.get("/api/v1/weeks", params={"reference": "2025-02-30"})

    assert response.status_code == 400
    assert "try again" in response.json()["detail"]


def test_preview_derives_minutes_and_errors(client):
    days = [_day() for _ in range(7)]
    days[1] = _day(stayEnd="08:00")
    response = client.post(
        "/api/v1/weekly-report/preview",
        json={"referenceDate": "2025-04-07", "prevWeekDays": days},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["prevWeekDays"][0]["minutes"] == 480
    assert data["prevWeekDays"][0]["breakMinutes"] == 60
    assert data["prevWeekDays"][1]["minutes"] == 0
    assert data["prevWeekDays"][1]["errors"]
    assert data["currentWeekDays"][0]["date"] == "2025-04-14 (月)"
    assert data["totalPrevMinutes"] == 6 * 480
    assert data["totalPrevHoursRounded"] == 48


def test_submit_returns_pdf_and_archives(client, archiver, rendered):
    response = client.post("/api/v1/weekly-report", json=_report())

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.content == b"%PDF-1.4 test"

    disposition = response.headers["content-disposition"]
    assert disposition.startswith("attachment;")
    assert "filename*=UTF-8''" in disposition
    assert disposition.endswith("_2025-04-14.pdf")

    payload = rendered[0]
    assert payload.total_prev_minutes == 3360
    assert payload.total_prev_hours_rounded == 56
    assert archiver.calls == [(payload, b"%PDF-1.4 test")]


def test_client_totals_are_ignored(client, rendered):
    body = _report(totalPrevMinutes=1, totalPrevHoursRounded=99)
    body["prevWeekDays"][0]["minutes"] = 9999

    assert client.post("/api/v1/weekly-report", json=body).status_code == 200
    assert rendered[0].total_prev_minutes == 3360
    assert rendered[0].prev_week_days[0].minutes == 480


def test_validation_errors_are_listed_in_order(client, archiver):
    days = [_day() for _ in range(7)]
    days[3] = _day("x" * 21)
    response = client.post(
        "/api/v1/weekly-report",
        json=_report(name="", prevWeekDays=days, prevGoalResultPercent=75),
    )

    assert response.status_code == 400
    data = response.json()
    assert [error["field"] for error in data["errors"]] == [
        "name",
        "prevWeekDays[3].content",
        "prevGoalResultPercent",
    ]
    assert "prevWeekDays[3].content" in data["detail"]
    assert archiver.calls == []


def test_wrong_percent_type_is_reported_with_other_issues(client):
    response = client.post("/api/v1/weekly-report", json=_report(name="", prevGoalResultPercent="lots"))

    assert response.status_code == 400
    assert [error["field"] for error in response.json()["errors"]] == ["name", "prevGoalResultPercent"]


def test_null_and_numeric_text_fields_are_accepted(client, rendered):
    response = client.post("/api/v1/weekly-report", json=_report(notes=None, issues=42))

    assert response.status_code == 200
    assert rendered[0].notes == ""
    assert rendered[0].issues == "42"


def test_malformed_body_uses_same_error_shape(client):
    response = client.post("/api/v1/weekly-report", json=_report(prevWeekDays="monday"))

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "prevWeekDays"


def test_submission_datetime_becomes_a_date_in_the_filename(client, rendered):
    response = client.post("/api/v1/weekly-report", json=_report(submissionDate="2025-04-14T10:30:00"))

    assert response.status_code == 200
    assert response.headers["content-disposition"].endswith("_2025-04-14.pdf")
    assert rendered[0].submission_date == "2025-04-14"


def test_empty_render_is_server_error(archiver):
    app = create_app(config=load_config(env={}), archiver=archiver, renderer=lambda payload: b"")
    response = TestClient(app).post("/api/v1/weekly-report", json=_report())

    assert response.status_code == 500
    assert response.json()["detail"] == "PDF generation failed"
    assert archiver.calls == []


def test_locale_prefix_redirects(client):
    response = client.get("/ja/api/v1/health", follow_redirects=False)

    assert response.status_code in (302, 307)
    assert response.headers["location"].endswith("/api/v1/health")
    assert client.get("/ja/api/v1/health").json()["status"] == "healthy"


def test_real_renderer_handles_line_break_heavy_fields(archiver):
    app = create_app(config=load_config(env={}), archiver=archiver)
    body = _report(notes="\n" * 30, issues="\n" * 30, achievedPoints="\n" * 30)

    response = TestClient(app).post("/api/v1/weekly-report", json=body)

    assert response.status_code == 200
    assert response.content.startswith(b"%PDF")
