"""
Tests for the HTTP API
======================

Runs the FastAPI app with a fresh session service and no reply delays.
"""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from courtroom import main
from courtroom.config import Settings
from courtroom.services import SessionService


@pytest.fixture
def service():
    return SessionService(Settings(response_delay_seconds=0, judgment_delay_seconds=0))


@pytest.fixture
def client(service, monkeypatch):
    monkeypatch.setattr(main, "service", service)
    with TestClient(main.app) as c:
        yield c


def open_case(client, **payload):
    body = {"case_title": "State of Maharashtra vs Rajesh Kumar", "case_type": "criminal",
            "human_role": "prosecution"}
    body.update(payload)
    response = client.post("/sessions", json=body)
    assert response.status_code == 200
    return response.json()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_open_session(client):
    data = open_case(client)
    assert data["state"] == "opening"
    assert data["turn"]["speaker"] == "arbiter"
    assert data["turn"]["kind"] == "welcome"

    listing = client.get("/sessions").json()
    assert listing["count"] == 1
    assert listing["sessions"][0]["id"] == data["session_id"]


def test_unknown_case_type_falls_back(client):
    data = open_case(client, case_type="maritime")
    snapshot = client.get(f"/sessions/{data['session_id']}").json()
    assert snapshot["case_type"] == "other"


def test_submit_turn(client):
    session_id = open_case(client)["session_id"]
    response = client.post(f"/sessions/{session_id}/turns",
                           data={"text": "Section 302 IPC applies to this murder."})
    assert response.status_code == 200
    data = response.json()
    assert data["state"] == "exchange"
    assert data["judgment"] is None
    assert [t["speaker"] for t in data["turns"]] == ["prosecution", "defense"]

    snapshot = client.get(f"/sessions/{session_id}").json()
    assert len(snapshot["turns"]) == 3


def test_blank_turn_is_rejected(client):
    session_id = open_case(client)["session_id"]
    response = client.post(f"/sessions/{session_id}/turns", data={"text": "  "})
    assert response.status_code == 422
    assert response.json()["detail"]["error"] == "InvalidTurn"
    assert len(client.get(f"/sessions/{session_id}").json()["turns"]) == 1


def test_unknown_session(client):
    response = client.post("/sessions/case-missing/turns", data={"text": "Hello"})
    assert response.status_code == 404
    assert response.json()["detail"]["error"] == "SessionNotFound"
    assert client.get("/sessions/case-missing").status_code == 404
    assert client.get("/sessions/case-missing/transcript").status_code == 404


def test_attachment_upload(client):
    session_id = open_case(client)["session_id"]
    files = [("files", ("forensic_report.pdf", b"%PDF-1.4 test", "application/pdf"))]
    response = client.post(f"/sessions/{session_id}/turns", data={"text": ""}, files=files)
    assert response.status_code == 200

    human, reply = response.json()["turns"]
    attachment = human["attachments"][0]
    assert attachment["name"] == "forensic_report.pdf"
    assert attachment["size"] == len(b"%PDF-1.4 test")
    assert Path(attachment["handle"]).read_bytes() == b"%PDF-1.4 test"
    assert reply["speaker"] == "arbiter"
    assert "- forensic_report.pdf: Expert report received." in reply["content"]


def test_role_switch(client):
    session_id = open_case(client)["session_id"]
    response = client.post(f"/sessions/{session_id}/role")
    assert response.status_code == 409
    assert response.json()["detail"]["error"] == "InvalidTransition"

    client.post(f"/sessions/{session_id}/turns", data={"text": "The CCTV recording shows the accused."})
    response = client.post(f"/sessions/{session_id}/role")
    assert response.status_code == 200
    assert response.json()["human_role"] == "defense"


def test_full_hearing_and_transcript(client):
    session_id = open_case(client)["session_id"]
    data = None
    for _ in range(13):
        response = client.post(f"/sessions/{session_id}/turns",
                               data={"text": "The CCTV recording shows the accused leaving at midnight."})
        assert response.status_code == 200
        data = response.json()

    assert data["state"] == "delivered"
    assert data["judgment"]["verdict"] in ("Guilty", "Not Guilty")
    assert data["turns"][-1]["kind"] == "judgment"

    response = client.post(f"/sessions/{session_id}/turns", data={"text": "One more thing."})
    assert response.status_code == 409

    transcript = client.get(f"/sessions/{session_id}/transcript").json()
    positions = [entry["position"] for entry in transcript["transcript"]]
    assert positions == list(range(30))
    assert transcript["case"]["title"] == "State of Maharashtra vs Rajesh Kumar"
    assert transcript["judge"]["verdict"] == data["judgment"]["verdict"]


def test_discard_session(client):
    session_id = open_case(client)["session_id"]
    response = client.delete(f"/sessions/{session_id}")
    assert response.status_code == 200
    assert response.json() == {"session_id": session_id, "discarded": True}

    assert client.get(f"/sessions/{session_id}").status_code == 404
    assert client.get("/sessions").json()["count"] == 0
    assert client.delete(f"/sessions/{session_id}").status_code == 404
    assert client.get(f"/sessions/{session_id}/transcript").status_code == 200


def test_rejected_turn_stores_no_upload(client):
    session_id = open_case(client)["session_id"]
    for _ in range(13):
        client.post(f"/sessions/{session_id}/turns",
                    data={"text": "The CCTV recording shows the accused leaving at midnight."})

    stored = set(main.UPLOAD_DIR.iterdir())
    files = [("files", ("late_exhibit.pdf", b"%PDF-1.4 late", "application/pdf"))]
    response = client.post(f"/sessions/{session_id}/turns", data={"text": "A late exhibit."}, files=files)
    assert response.status_code == 409
    assert set(main.UPLOAD_DIR.iterdir()) == stored
